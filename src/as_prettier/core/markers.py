from collections.abc import Sequence

from as_prettier.core.decorators import locate_decorators
from as_prettier.core.errors import DecoratorRangeError
from as_prettier.core.ports.parser import DialectParser
from as_prettier.models import DecoratorRange

PREFIX = "/*MAGIC_CODE_ASSEMBLYSCRIPT_PRETTIER"
POSTFIX = "MAGIC_CODE_ASSEMBLYSCRIPT_PRETTIER*/"


def mark(code: str, ranges: Sequence[DecoratorRange] | None) -> str:
    """Wrap each decorator range of ``code`` in ``PREFIX``/``POSTFIX`` so prettier sees a comment.

    ``ranges`` must be ordered and disjoint. ``None`` returns ``code`` unchanged.
    """
    if ranges is None:
        return code

    pieces: list[str] = []
    cursor = 0
    for r in ranges:
        if r.start < cursor or r.end < r.start or r.end > len(code):
            raise DecoratorRangeError(
                f"Decorator range [{r.start}, {r.end}) overlaps, is unordered or exceeds "
                f"source length {len(code)} (cursor at {cursor})"
            )
        pieces.append(f"{code[cursor : r.start]}{PREFIX}{code[r.start : r.end]}")
        cursor = r.end
    pieces.append(code[cursor:])
    return POSTFIX.join(pieces)


def mark_code(code: str, parser: DialectParser) -> str:
    return mark(code, locate_decorators(code, parser))


def unmark(text: str) -> str:
    return text.replace(PREFIX, "").replace(POSTFIX, "")
