import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "tabotxt")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
TAB_SIZE_DEFAULT = 8


def load_config():
    cfg = {
        "TAB_SIZE": TAB_SIZE_DEFAULT,
    }

    if os.path.exists(CONFIG_JSON):
        try:
            with open(CONFIG_JSON, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            return cfg
        if isinstance(data, dict):
            tab_size = data.get("tab_size")
            # bool is an int subclass; reject it explicitly
            if isinstance(tab_size, int) and not isinstance(tab_size, bool) and tab_size > 0:
                cfg["TAB_SIZE"] = tab_size

    return cfg
