import curses

from terminal import key_code
from text_width import char_width, display_width, trim_display


class LineEditor:
    """Single-line text input with emacs-style editing keys."""

    def __init__(self):
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0
        self.active = False

    # ---------- state helpers ----------
    def activate(self):
        self.active = True
        self.cursor = max(0, min(self.cursor, len(self.buffer)))

    def get_buffer(self):
        return self.buffer

    def set_buffer(self, text):
        self.buffer = text or ""
        self.cursor = len(self.buffer)
        self.hscroll = 0

    # ---------- word helpers ----------
    @staticmethod
    def _is_word_char(ch):
        return ch.isalnum() or ch == "_"

    def _word_boundary_left(self):
        i = self.cursor
        # skip whitespace and punctuation immediately left
        while i > 0 and not self._is_word_char(self.buffer[i - 1]):
            i -= 1
        # skip the word directly left of the cursor
        while i > 0 and self._is_word_char(self.buffer[i - 1]):
            i -= 1
        return i

    # ---------- input handling ----------
    def handle_key(self, key):
        if not self.active:
            return None

        ch = key_code(key)
        if ch is None:
            self.buffer = self.buffer[: self.cursor] + key + self.buffer[self.cursor :]
            self.cursor += len(key)
            return None

        # submit
        if ch in (10, 13, curses.KEY_ENTER):
            return "submit"

        # cancel
        if ch in (27, 3):  # Esc / Ctrl+C
            return "cancel"

        if ch == 23:  # Ctrl+W, delete word backward
            start = self._word_boundary_left()
            if start < self.cursor:
                self.buffer = self.buffer[:start] + self.buffer[self.cursor :]
                self.cursor = start
            return None

        if ch == 21:  # Ctrl+U, kill to line start
            if self.cursor > 0:
                self.buffer = self.buffer[self.cursor :]
                self.cursor = 0
            return None

        if ch == 11:  # Ctrl+K, kill to line end
            self.buffer = self.buffer[: self.cursor]
            return None

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.cursor > 0:
                self.buffer = (
                    self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
                )
                self.cursor -= 1
            return None

        if ch in (curses.KEY_DC, 4):  # Delete or Ctrl+D
            self.buffer = self.buffer[: self.cursor] + self.buffer[self.cursor + 1 :]
            return None

        if ch in (curses.KEY_LEFT, 2):  # Left or Ctrl+B
            self.cursor = max(0, self.cursor - 1)
            return None

        if ch in (curses.KEY_RIGHT, 6):  # Right or Ctrl+F
            self.cursor = min(len(self.buffer), self.cursor + 1)
            return None

        if ch in (curses.KEY_HOME, 1):  # Home or Ctrl+A
            self.cursor = 0
            return None

        if ch in (curses.KEY_END, 5):  # End or Ctrl+E
            self.cursor = len(self.buffer)
            return None

        return None

    # ---------- rendering ----------
    def draw(self, win, prompt=""):
        win.erase()
        h, w = win.getmaxyx()
        prompt_w = display_width(prompt)
        text_w = max(1, w - prompt_w - 1)

        # adjust scroll to keep cursor visible
        if self.cursor < self.hscroll:
            self.hscroll = self.cursor
        while display_width(self.buffer[self.hscroll : self.cursor]) > text_w:
            self.hscroll += 1

        visible = trim_display(self.buffer[self.hscroll :], text_w)

        try:
            win.addnstr(0, 0, prompt, len(prompt))
            win.addnstr(0, prompt_w, visible, len(visible))
        except curses.error:
            pass

        cx = prompt_w + sum(char_width(c) for c in self.buffer[self.hscroll : self.cursor])
        try:
            win.move(0, max(0, min(cx, w - 1)))
        except curses.error:
            pass

        win.refresh()


def read_line(terminal, win, initial, prompt=""):
    """Let the user edit ``initial``; return the accepted text, or
    ``initial`` unchanged when the edit is cancelled."""
    editor = LineEditor()
    editor.set_buffer(initial)
    editor.activate()
    terminal.set_cursor_visible(True)
    try:
        while True:
            editor.draw(win, prompt)
            result = editor.handle_key(terminal.read_key())
            if result == "submit":
                return editor.get_buffer()
            if result == "cancel":
                return initial
    finally:
        terminal.set_cursor_visible(False)
