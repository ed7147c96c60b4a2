from sheet import Sheet
from viewport import Viewport


class AppState:
    def __init__(self, sheet: Sheet, file_path: str | None):
        self.sheet = sheet
        self.file_path = file_path
        self.viewport = Viewport(sheet)
        self.mode = "navigate"  # navigate | edit | command | quit

    @property
    def cursor(self):
        return self.viewport.cursor
