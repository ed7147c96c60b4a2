from typing import Iterator, List, Tuple

from text_width import tab_units


def split_lines(text: str) -> List[str]:
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def tokenize_line(line: str, tab_size: int) -> Iterator[Tuple[int, str, int]]:
    """Yield (start, text, units) for each token of a tab-padded line.

    Empty tokens right after a token are padding: each one widens that token
    by one tab stop instead of standing on its own.
    """
    items = line.split("\t")
    start = 0
    i = 0
    while i < len(items):
        text = items[i]
        units = tab_units(text, tab_size)
        i += 1
        while i < len(items) and items[i] == "":
            units += 1
            i += 1
        yield start, text, units
        start += units


def infer_widths(lines: List[str], tab_size: int) -> List[int]:
    widths: List[int] = []

    for line in lines:
        tokens = list(tokenize_line(line, tab_size))
        index = 0
        for n, (_, _, width) in enumerate(tokens):
            has_more = n < len(tokens) - 1
            while True:
                if index >= len(widths):
                    widths.append(width)
                    index += 1
                    break

                recorded = widths[index]
                if width == recorded:
                    index += 1
                    break

                if width < recorded:
                    # a shorter token followed by more content puts a
                    # column boundary inside the recorded column
                    if has_more:
                        widths[index] = width
                        widths.insert(index + 1, recorded - width)
                    index += 1
                    break

                if index == len(widths) - 1:
                    widths[index] = width
                    index += 1
                    break

                # token spans this column, carry the excess to the next one
                width -= recorded
                index += 1

    return widths


def accumulate(widths: List[int]) -> List[int]:
    accum = [0]
    for w in widths:
        accum.append(accum[-1] + w)
    return accum
