from bisect import bisect_right
from typing import Dict, Iterator, List, Optional, Tuple

from text_width import tab_units
from width_inference import accumulate, infer_widths, split_lines, tokenize_line

Pos = Tuple[int, int]

DEFAULT_TAB_SIZE = 8


class Sheet:
    """Sparse grid of cells keyed by (col, row).

    ``widths`` holds each column's width in tab stops and ``accum_widths``
    its prefix sums, so ``accum_widths[col]`` is the tab stop a column
    starts on.
    """

    def __init__(self, tab_size: int = DEFAULT_TAB_SIZE):
        if tab_size < 1:
            raise ValueError("tab_size must be positive")
        self._tab_size = tab_size
        self.units: Dict[Pos, str] = {}
        self._size: Pos = (1, 1)
        self._widths: List[int] = [1]
        self._accum_widths: List[int] = [0, 1]

    # ---------- construction ----------
    @classmethod
    def from_text(cls, text: str, tab_size: int = DEFAULT_TAB_SIZE) -> "Sheet":
        sheet = cls(tab_size)
        lines = split_lines(text)
        if not lines:
            return sheet

        widths = infer_widths(lines, tab_size)
        accum = accumulate(widths)

        units = {}
        for row, line in enumerate(lines):
            for start, text_item, _ in tokenize_line(line, tab_size):
                if not text_item:
                    continue
                # every token start is a column boundary after inference
                col = bisect_right(accum, start) - 1
                units[(col, row)] = text_item

        sheet.units = units
        sheet._widths = widths
        sheet._accum_widths = accum
        sheet._size = (len(widths), len(lines))
        return sheet

    @classmethod
    def from_file(cls, path: str, tab_size: int = DEFAULT_TAB_SIZE) -> "Sheet":
        with open(path, "r", encoding="utf-8", newline="") as f:
            return cls.from_text(f.read(), tab_size)

    # ---------- read access ----------
    @property
    def tab_size(self) -> int:
        return self._tab_size

    @property
    def size(self) -> Pos:
        return self._size

    @property
    def widths(self) -> List[int]:
        return list(self._widths)

    @property
    def accum_widths(self) -> List[int]:
        return list(self._accum_widths)

    def content_at(self, pos: Pos) -> Optional[str]:
        return self.units.get(tuple(pos))

    def width_at(self, col: int) -> Optional[int]:
        if 0 <= col < len(self._widths):
            return self._widths[col]
        return None

    def accum_width_at(self, col: int) -> Optional[int]:
        if 0 <= col < len(self._accum_widths):
            return self._accum_widths[col]
        return None

    def cells(self) -> Iterator[Tuple[Pos, str]]:
        """Occupied cells in row-major order."""
        for pos in sorted(self.units, key=lambda p: (p[1], p[0])):
            yield pos, self.units[pos]

    def measure(self, text: str) -> int:
        return tab_units(text, self._tab_size)

    # ---------- mutation ----------
    def edit(self, pos: Pos, text: str) -> None:
        col, row = pos
        if col < 0 or row < 0:
            raise IndexError(f"cell position out of range: {pos}")
        text = " ".join(text.replace("\t", " ").splitlines()).strip()

        if not text:
            self.units.pop((col, row), None)
            if col < self._size[0] and self._is_col_empty(col):
                self._remove_col(col)
            if row < self._size[1] and self._is_row_empty(row):
                self._remove_row(row)
        else:
            self.units[(col, row)] = text
            while len(self._widths) <= col:
                self._widths.append(1)
            self._size = (len(self._widths), max(self._size[1], row + 1))
            self._widths[col] = self._col_width(col)

        self._accum_widths = accumulate(self._widths)

    def append_row(self) -> None:
        self._size = (self._size[0], self._size[1] + 1)

    def append_col(self) -> None:
        self._widths.append(1)
        self._accum_widths = accumulate(self._widths)
        self._size = (len(self._widths), self._size[1])

    # ---------- helpers ----------
    def _col_width(self, col: int) -> int:
        return max(
            (self.measure(text) for (c, _), text in self.units.items() if c == col),
            default=1,
        )

    def _is_col_empty(self, col: int) -> bool:
        return not any(c == col for c, _ in self.units)

    def _is_row_empty(self, row: int) -> bool:
        return not any(r == row for _, r in self.units)

    def _remove_col(self, index: int) -> None:
        if self._size[0] == 1:
            self._widths = [1]
            return
        self.units = {
            ((c - 1 if c > index else c), r): text
            for (c, r), text in self.units.items()
        }
        del self._widths[index]
        self._size = (len(self._widths), self._size[1])

    def _remove_row(self, index: int) -> None:
        if self._size[1] == 1:
            return
        self.units = {
            (c, (r - 1 if r > index else r)): text
            for (c, r), text in self.units.items()
        }
        self._size = (self._size[0], self._size[1] - 1)
