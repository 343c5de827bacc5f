import logging

from as_prettier.core.errors import DialectParseError, UnsupportedNodeShapeError
from as_prettier.core.ports.parser import DialectParser
from as_prettier.models import DeclarationNode, DecoratorRange, NodeKind

logger = logging.getLogger(__name__)

# Only syntax is needed, so the parser never sees the real path.
PLACEHOLDER_FILE_NAME = "input.ts"


def collect_decorator_ranges(node: DeclarationNode) -> list[DecoratorRange]:
    """Flatten the decorators of every enum, method and function in the tree.

    Containers (source, class, interface, namespace) are walked member by
    member; their own decorators are not collected.
    """
    ranges: list[DecoratorRange] = []

    def _visit(n: DeclarationNode) -> None:
        match n.kind:
            case NodeKind.SOURCE | NodeKind.CLASS | NodeKind.INTERFACE | NodeKind.NAMESPACE:
                for member in n.members or []:
                    _visit(member)
            case NodeKind.ENUM | NodeKind.METHOD | NodeKind.FUNCTION:
                if n.decorators:
                    ranges.extend(n.decorators)
            case _:
                raise UnsupportedNodeShapeError(str(n.kind))

    _visit(node)
    return ranges


def locate_decorators(code: str, parser: DialectParser) -> list[DecoratorRange] | None:
    """Return decorator ranges ordered by start offset.

    Returns ``None`` when the parser rejects ``code``.
    """
    try:
        source = parser.parse(code, PLACEHOLDER_FILE_NAME)
    except DialectParseError as exc:
        logger.debug("Not AssemblyScript source, leaving decorators unmarked: %s", exc)
        return None

    ranges = collect_decorator_ranges(source)
    ranges.sort(key=lambda r: r.start)
    return ranges
