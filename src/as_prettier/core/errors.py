class AsPrettierError(Exception):
    """Base class for errors raised by as-prettier."""


class DialectParseError(AsPrettierError):
    """The dialect parser rejected the input."""


class UnsupportedNodeShapeError(AsPrettierError):
    """A syntax node has no traversal rule."""

    def __init__(self, node_kind: str) -> None:
        super().__init__(f'Unknown node kind "{node_kind}".')
        self.node_kind = node_kind


class DecoratorRangeError(AsPrettierError):
    """Decorator ranges overlap, are unordered, or fall outside the source text."""


class FormatterError(AsPrettierError):
    """The external formatter failed or rejected its input."""
