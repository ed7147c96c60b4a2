from typing import Iterator, Optional, Tuple

from sheet import Pos, Sheet


def is_in_offset_bounds(val: int, lower: int, offset: int) -> bool:
    return lower <= val < lower + offset


class Viewport:
    """Cursor and top-left corner of the visible window over a sheet.

    The corner follows the cursor edge-triggered: it only moves when the
    cursor leaves the window, and then by the same delta as the cursor.
    """

    def __init__(self, sheet: Sheet):
        self.sheet = sheet
        self.cursor: Pos = (0, 0)
        self.corner: Pos = (0, 0)

    def col_extent(self, view_cols: int) -> int:
        """Visible width in tab stops."""
        return max(1, view_cols // self.sheet.tab_size)

    def display_pos(self, pos: Pos, corner: Optional[Pos] = None) -> Tuple[int, int]:
        if corner is None:
            corner = self.corner
        if pos[0] < corner[0] or pos[1] < corner[1]:
            raise ValueError(f"{pos} is outside the window at {corner}")
        stops = self.sheet.accum_width_at(pos[0]) - self.sheet.accum_width_at(corner[0])
        return stops * self.sheet.tab_size, pos[1] - corner[1]

    def move_by(self, dx: int, dy: int, view_size: Tuple[int, int]) -> None:
        cols, rows = self.sheet.size
        view_cols, view_rows = view_size

        col = max(0, min(self.cursor[0] + dx, cols - 1))
        row = max(0, min(self.cursor[1] + dy, rows - 1))
        self.cursor = (col, row)

        extent = self.col_extent(view_cols)
        corner_col, corner_row = self.corner
        if not is_in_offset_bounds(
            self.sheet.accum_width_at(col),
            self.sheet.accum_width_at(min(corner_col, col)),
            extent,
        ):
            corner_col += dx
        if not is_in_offset_bounds(row, corner_row, max(1, view_rows)):
            corner_row += dy

        corner_col = max(0, min(corner_col, col))
        # a wide column between corner and cursor can still push the cursor out
        while corner_col < col and not is_in_offset_bounds(
            self.sheet.accum_width_at(col),
            self.sheet.accum_width_at(corner_col),
            extent,
        ):
            corner_col += 1

        self.corner = (corner_col, max(0, min(corner_row, row)))

    def clamp(self) -> None:
        """Pull cursor and corner back inside the sheet after it shrinks."""
        cols, rows = self.sheet.size
        col = max(0, min(self.cursor[0], cols - 1))
        row = max(0, min(self.cursor[1], rows - 1))
        self.cursor = (col, row)
        self.corner = (min(self.corner[0], col), min(self.corner[1], row))

    def visible_cells(
        self, view_size: Tuple[int, int]
    ) -> Iterator[Tuple[Pos, str, Tuple[int, int]]]:
        """Occupied cells whose start lies inside the window, row-major."""
        view_cols, view_rows = view_size
        corner_col, corner_row = self.corner
        for pos, text in self.sheet.cells():
            col, row = pos
            if col < corner_col or not (corner_row <= row < corner_row + view_rows):
                continue
            x, y = self.display_pos(pos)
            if x >= view_cols:
                continue
            yield pos, text, (x, y)
