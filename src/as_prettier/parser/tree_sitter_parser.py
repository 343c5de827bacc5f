"""AssemblyScript declaration trees built from the tree-sitter TypeScript grammar."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import cast

from tree_sitter import Node
from tree_sitter_language_pack import SupportedLanguage, get_parser

from as_prettier.core.errors import DialectParseError, UnsupportedNodeShapeError
from as_prettier.models import DeclarationNode, DecoratorRange, NodeKind

logger = logging.getLogger(__name__)

_LANGUAGE = "typescript"

_CONTAINER_KINDS = {
    "class_declaration": NodeKind.CLASS,
    "abstract_class_declaration": NodeKind.CLASS,
    "interface_declaration": NodeKind.INTERFACE,
    "internal_module": NodeKind.NAMESPACE,
    "module": NodeKind.NAMESPACE,
}

_DECORATED_KINDS = {
    "enum_declaration": NodeKind.ENUM,
    "method_definition": NodeKind.METHOD,
    "method_signature": NodeKind.METHOD,
    "abstract_method_signature": NodeKind.METHOD,
    "function_declaration": NodeKind.FUNCTION,
    "generator_function_declaration": NodeKind.FUNCTION,
    "function_signature": NodeKind.FUNCTION,
}

_COMMENT_TYPES = frozenset({"comment", "html_comment"})

# Nodes whose named children are converted by ``_TreeConverter._members``.
_MEMBER_LIST_TYPES = frozenset({"program", "statement_block", "class_body"})

# Statements and members that never carry collectable decorators.
_OPAQUE_TYPES = frozenset(
    {
        "import_statement",
        "import_alias",
        "lexical_declaration",
        "variable_declaration",
        "type_alias_declaration",
        "statement_block",
        "if_statement",
        "switch_statement",
        "for_statement",
        "for_in_statement",
        "while_statement",
        "do_statement",
        "try_statement",
        "with_statement",
        "break_statement",
        "continue_statement",
        "return_statement",
        "throw_statement",
        "empty_statement",
        "labeled_statement",
        "debugger_statement",
        "hash_bang_line",
        "public_field_definition",
        "class_static_block",
        "index_signature",
        "property_signature",
        "call_signature",
        "construct_signature",
    }
)


class TreeSitterDialectParser:
    """Parse AssemblyScript source into a ``DeclarationNode`` tree.

    Implements the ``DialectParser`` protocol. A new tree-sitter parser is
    created for every call and the syntax tree is dropped once converted.
    """

    def parse(self, code: str, file_name: str) -> DeclarationNode:
        source_bytes = code.encode("utf-8")
        parser = get_parser(cast(SupportedLanguage, _LANGUAGE))
        tree = parser.parse(source_bytes)
        root = tree.root_node
        if root.has_error and _has_unrecoverable_error(root):
            raise DialectParseError(f"{file_name}: syntax errors in {_LANGUAGE} source")
        return _TreeConverter(code, source_bytes).convert(root)


def _decorator_children(node: Node) -> list[Node]:
    return [child for child in node.children if child.type == "decorator"]


def _stray_decorators(node: Node) -> list[Node] | None:
    """Return the decorators of an ERROR node that holds nothing else.

    The TypeScript grammar has no rule for decorators on a bare ``function``,
    ``enum`` or ``declare function``. It wraps them in an ERROR node and
    parses the declaration as the next sibling.
    """
    if node.type != "ERROR":
        return None
    decorators: list[Node] = []
    for child in node.named_children:
        if child.type == "decorator" and not child.has_error:
            decorators.append(child)
        elif child.type not in _COMMENT_TYPES:
            return None
    return decorators or None


def _has_unrecoverable_error(node: Node) -> bool:
    if node.is_missing:
        return True
    if node.type == "ERROR":
        parent = node.parent
        return parent is None or parent.type not in _MEMBER_LIST_TYPES or _stray_decorators(node) is None
    return any(child.has_error and _has_unrecoverable_error(child) for child in node.children)


def _name(node: Node) -> str | None:
    name = node.child_by_field_name("name")
    if name is None or name.text is None:
        return None
    return name.text.decode("utf-8")


class _TreeConverter:
    def __init__(self, code: str, source_bytes: bytes) -> None:
        self._source_bytes = source_bytes
        self._byte_offsets_are_chars = len(code) == len(source_bytes)

    def convert(self, root: Node) -> DeclarationNode:
        return DeclarationNode(kind=NodeKind.SOURCE, members=self._members(root))

    def _char_offset(self, byte_offset: int) -> int:
        if self._byte_offsets_are_chars:
            return byte_offset
        return len(self._source_bytes[:byte_offset].decode("utf-8"))

    def _range(self, node: Node) -> DecoratorRange:
        return DecoratorRange(start=self._char_offset(node.start_byte), end=self._char_offset(node.end_byte))

    def _members(self, parent: Node) -> list[DeclarationNode]:
        """Convert the named children of a program, block or body, in order.

        Class bodies hold a member's decorators as preceding siblings, and
        decorators on bare functions and enums arrive in a preceding ERROR
        node, so decorators are buffered until the next member.
        """
        members: list[DeclarationNode] = []
        pending: list[Node] = []
        for child in parent.named_children:
            if child.type == "decorator":
                pending.append(child)
                continue
            stray = _stray_decorators(child)
            if stray is not None:
                pending.extend(stray)
                continue
            if child.type in _COMMENT_TYPES:
                continue
            converted = self._convert(child, pending)
            pending = []
            if converted is not None:
                members.append(converted)
        return members

    def _convert(self, node: Node, decorators: Sequence[Node] = ()) -> DeclarationNode | None:
        if node.type == "export_statement":
            declaration = node.child_by_field_name("declaration")
            if declaration is None:
                return None
            return self._convert(declaration, [*decorators, *_decorator_children(node)])

        if node.type == "ambient_declaration":
            for child in node.named_children:
                if child.type in _CONTAINER_KINDS or child.type in _DECORATED_KINDS:
                    return self._convert(child, decorators)
            return None

        if node.type == "expression_statement":
            # `namespace N {}` can surface as an expression statement
            inner = node.named_children[0] if node.named_child_count == 1 else None
            if inner is not None and inner.type == "internal_module":
                return self._convert(inner, decorators)
            return None

        if node.type in _CONTAINER_KINDS:
            body = node.child_by_field_name("body")
            return DeclarationNode(
                kind=_CONTAINER_KINDS[node.type],
                name=_name(node),
                members=self._members(body) if body is not None else [],
            )

        if node.type in _DECORATED_KINDS:
            ranges = [self._range(d) for d in [*decorators, *_decorator_children(node)]]
            return DeclarationNode(
                kind=_DECORATED_KINDS[node.type],
                name=_name(node),
                decorators=ranges or None,
            )

        if node.type in _OPAQUE_TYPES:
            return None

        logger.debug("No traversal rule for tree-sitter node %s at byte %d", node.type, node.start_byte)
        raise UnsupportedNodeShapeError(node.type)
