import curses
import os
import sys

from _version import __version__
from app_state import AppState
from config_paths import load_config
from orchestrator import Orchestrator
from sheet import Sheet
from terminal import Terminal


USAGE = (
    "tabotxt - terminal editor for tab-aligned text\n\nUsage:\n  tabotxt [path]\n  tabotxt -v\n"
)


def load_sheet(path, tab_size):
    """Load ``path`` into a sheet; a path that does not exist yet gives an
    empty sheet that will be created on first save."""
    if path is None or not os.path.exists(path):
        return Sheet(tab_size)
    return Sheet.from_file(path, tab_size)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0

    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    path = args[0] if args else None
    config = load_config()

    try:
        sheet = load_sheet(path, config["TAB_SIZE"])
    except (OSError, UnicodeDecodeError) as e:
        print(f"Load failed: {e}", file=sys.stderr)
        sys.exit(1)

    state = AppState(sheet, path)
    try:
        with Terminal() as terminal:
            Orchestrator(terminal, state).run()
    except (OSError, curses.error) as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)
    return 0


if __name__ == "__main__":
    main()
