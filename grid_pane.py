import curses

from text_width import trim_display


class GridPane:
    PAIR_CELL_TEXT = 6

    def __init__(self):
        self.base_attr = curses.A_NORMAL
        try:
            if not curses.has_colors():
                return
            curses.init_pair(self.PAIR_CELL_TEXT, curses.COLOR_WHITE, -1)
            self.base_attr = curses.color_pair(self.PAIR_CELL_TEXT)
        except (curses.error, ValueError):
            # no initscr yet, or a terminal with too few colours
            self.base_attr = curses.A_NORMAL

    def draw(self, win, viewport, active=True):
        win.erase()
        h, w = win.getmaxyx()
        view_size = (w, h)

        for pos, text, (x, y) in viewport.visible_cells(view_size):
            if pos == viewport.cursor:
                continue
            self._put(win, y, x, text, w, self.base_attr)

        # cursor cell drawn last so it is never overdrawn by a wide neighbour
        cx, cy = viewport.display_pos(viewport.cursor)
        if cx < w and cy < h:
            text = viewport.sheet.content_at(viewport.cursor) or " "
            attr = self.base_attr | curses.A_REVERSE if active else self.base_attr
            self._put(win, cy, cx, text, w, attr)

        win.refresh()

    @staticmethod
    def _put(win, y, x, text, w, attr):
        visible = trim_display(text, max(0, w - x))
        if not visible:
            return
        try:
            win.addnstr(y, x, visible, len(visible), attr)
        except curses.error:
            pass
