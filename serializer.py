from typing import List

from sheet import Sheet


def serialize_row(sheet: Sheet, row: int) -> str:
    parts: List[str] = []
    # tab stop the previous cell's content ends in
    ended = 0
    for col in range(sheet.size[0]):
        text = sheet.content_at((col, row))
        if text is None:
            continue
        start = sheet.accum_width_at(col)
        if parts:
            # at least one tab even when the previous cell runs past this
            # column; the cell then reloads further right
            parts.append("\t" * max(1, start - ended))
        else:
            parts.append("\t" * start)
        parts.append(text)
        ended = start + sheet.measure(text) - 1
    return "".join(parts)


def serialize(sheet: Sheet) -> str:
    """Render the sheet back into tab-padded text, one line per row."""
    return "".join(serialize_row(sheet, row) + "\n" for row in range(sheet.size[1]))


def save(sheet: Sheet, path: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(serialize(sheet))
