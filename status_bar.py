import os
import time

MODE_LABELS = {
    "navigate": "NAV",
    "edit": "EDIT",
    "command": "CMD",
    "quit": "QUIT",
}


def render_status(context, width):
    """
    context keys: status_msg, status_until, mode, file_path, size, cursor
    """
    text = ""
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        mode = MODE_LABELS.get(context.get("mode", "navigate"), "NAV")
        fname = context.get("file_path") or "[no file]"
        if context.get("file_path"):
            fname = os.path.basename(fname)
        cols, rows = context.get("size", (1, 1))
        col, row = context.get("cursor", (0, 0))
        text = f" {mode} | {fname} | {cols}x{rows} | {col},{row}"

    return text.ljust(width)[:width]
