import contextlib
import curses
import os


def key_code(key):
    """Map a get_wch() result onto the integer codes getch() would return.

    Special keys are already ints. Control characters and DEL come back as
    one-character strings and are turned into their codes. Printable text
    returns None.
    """
    if isinstance(key, int):
        return key
    if len(key) == 1 and (ord(key) < 32 or ord(key) == 127):
        return ord(key)
    return None


class Terminal:
    """Owns the curses screen for the lifetime of a ``with`` block.

    Entering switches to the alternate screen in raw mode; leaving always
    restores the terminal, also when the block raises.
    """

    def __init__(self):
        self.stdscr = None

    def __enter__(self):
        # Make ESC snappy
        os.environ.setdefault("ESCDELAY", "25")
        self.stdscr = curses.initscr()
        try:
            curses.noecho()
            curses.raw()
            self.stdscr.keypad(True)
            try:
                curses.start_color()
                curses.use_default_colors()
            except curses.error:
                pass
            try:
                curses.curs_set(0)
            except curses.error:
                pass
        except BaseException:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self):
        if self.stdscr is None:
            return
        try:
            self.stdscr.keypad(False)
            curses.noraw()
            curses.echo()
        except curses.error:
            pass
        finally:
            self.stdscr = None
            curses.endwin()

    @contextlib.contextmanager
    def released(self):
        """Hand the terminal back in cooked mode for plain stdin/stdout use."""
        curses.def_prog_mode()
        curses.endwin()
        try:
            yield
        finally:
            curses.reset_prog_mode()
            curses.raw()
            self.stdscr.clear()
            self.stdscr.refresh()

    def read_key(self):
        return self.stdscr.get_wch()

    def set_cursor_visible(self, visible: bool):
        try:
            curses.curs_set(1 if visible else 0)
        except curses.error:
            pass
