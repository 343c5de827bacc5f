from as_prettier.core.decorators import collect_decorator_ranges, locate_decorators
from as_prettier.core.errors import (
    AsPrettierError,
    DecoratorRangeError,
    DialectParseError,
    FormatterError,
    UnsupportedNodeShapeError,
)
from as_prettier.core.format import (
    check_code,
    check_file,
    check_source,
    format_code,
    format_file,
    format_source,
)
from as_prettier.core.markers import POSTFIX, PREFIX, mark, mark_code, unmark

__all__ = [
    "POSTFIX",
    "PREFIX",
    "AsPrettierError",
    "DecoratorRangeError",
    "DialectParseError",
    "FormatterError",
    "UnsupportedNodeShapeError",
    "check_code",
    "check_file",
    "check_source",
    "collect_decorator_ranges",
    "format_code",
    "format_file",
    "format_source",
    "locate_decorators",
    "mark",
    "mark_code",
    "unmark",
]
