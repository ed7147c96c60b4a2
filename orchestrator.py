import curses
import time

import serializer
from grid_pane import GridPane
from line_editor import read_line
from screen_layout import ScreenLayout
from status_bar import render_status
from terminal import key_code


NAV_MOVES = {
    curses.KEY_UP: (0, -1),
    curses.KEY_DOWN: (0, 1),
    curses.KEY_LEFT: (-1, 0),
    curses.KEY_RIGHT: (1, 0),
    "k": (0, -1),
    "j": (0, 1),
    "h": (-1, 0),
    "l": (1, 0),
    9: (1, 0),  # Tab
    curses.KEY_BTAB: (-1, 0),  # Shift+Tab
    10: (0, 1),  # Enter
    13: (0, 1),
    curses.KEY_ENTER: (0, 1),
}

EDIT_KEYS = (curses.KEY_F2, "i")
QUIT_KEYS = (27, 3)  # Esc / Ctrl+C


class Orchestrator:
    """Runs the navigate / edit / command / quit mode loop.

    In navigate mode keys that are not bound are ignored.
    """

    def __init__(self, terminal, app_state, layout=None, prompt=input, line_reader=read_line):
        self.terminal = terminal
        self.state = app_state
        self.layout = layout if layout is not None else ScreenLayout(terminal.stdscr)
        self.grid = GridPane()
        self.prompt = prompt
        self.line_reader = line_reader

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _relayout(self):
        try:
            curses.update_lines_cols()
        except curses.error:
            pass
        self.layout = ScreenLayout(self.terminal.stdscr)
        self.state.viewport.clamp()

    # ---------------- UI ----------------

    def redraw(self):
        self.grid.draw(
            self.layout.table_win,
            self.state.viewport,
            active=(self.state.mode == "navigate"),
        )

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        text = render_status(
            {
                "status_msg": self.status_msg,
                "status_until": self.status_msg_until,
                "mode": self.state.mode,
                "file_path": self.state.file_path,
                "size": self.state.sheet.size,
                "cursor": self.state.cursor,
            },
            max(1, w - 1),
        )
        try:
            sw.addnstr(0, 0, text, max(1, w - 1))
        except curses.error:
            pass
        sw.refresh()

    # ---------------- navigate ----------------

    def move(self, dx, dy):
        self.state.viewport.move_by(dx, dy, self.layout.view_size)

    def handle_key(self, key):
        code = key_code(key)
        k = code if code is not None else key
        cols, rows = self.state.sheet.size
        col, row = self.state.cursor

        if k in NAV_MOVES:
            self.move(*NAV_MOVES[k])
        elif k == curses.KEY_NPAGE:
            self.move(0, self.layout.table_h)
        elif k == curses.KEY_PPAGE:
            self.move(0, -self.layout.table_h)
        elif k == curses.KEY_HOME:
            self.move(-col, 0)
        elif k == curses.KEY_END:
            self.move(cols - 1 - col, 0)
        elif k in EDIT_KEYS:
            self.state.mode = "edit"
        elif k == ":":
            self.state.mode = "command"
        elif k in QUIT_KEYS:
            self.state.mode = "quit"
        elif k == "o":
            self.state.sheet.append_row()
            self.move(0, rows - row)
        elif k == "a":
            self.state.sheet.append_col()
            self.move(cols - col, 0)
        elif k == curses.KEY_RESIZE:
            self._relayout()

    # ---------------- edit ----------------

    def edit_cell(self):
        pos = self.state.cursor
        initial = self.state.sheet.content_at(pos) or ""
        text = self.line_reader(self.terminal, self.layout.status_win, initial, "edit: ")
        if text != initial:
            self.state.sheet.edit(pos, text)
            self.state.viewport.clamp()
        self.state.mode = "navigate"

    # ---------------- command ----------------

    def run_command_prompt(self):
        with self.terminal.released():
            try:
                command = self.prompt(":")
            except (EOFError, KeyboardInterrupt):
                command = ""
            self.execute_command(command.strip())

    def execute_command(self, command):
        self.state.mode = "navigate"
        for c in command:
            if c == "w":
                self.save()
            elif c == "q":
                self.state.mode = "quit"
                return

    # ---------------- saving ----------------

    def save(self):
        path = self.state.file_path
        if not path:
            # no file was given on the command line: the target comes from stdin
            try:
                path = self.prompt("Save as: ").strip()
            except (EOFError, KeyboardInterrupt):
                path = ""
            if not path:
                self._set_status("Save canceled", 3)
                return False

        serializer.save(self.state.sheet, path)
        self.state.file_path = path
        self._set_status(f"Saved {path}", 3)
        return True

    # ---------------- main loop ----------------

    def run(self):
        while self.state.mode != "quit":
            if self.state.mode == "navigate":
                self.redraw()
                self.handle_key(self.terminal.read_key())
            elif self.state.mode == "edit":
                self.redraw()
                self.edit_cell()
            elif self.state.mode == "command":
                self.run_command_prompt()
