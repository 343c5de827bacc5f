"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from as_prettier.parser.tree_sitter_parser import TreeSitterDialectParser

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag everything under tests/unit as "unit"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        rel = Path(str(item.fspath)).relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Fake prettier
# ---------------------------------------------------------------------------


class FakeFormatter:
    """Stands in for prettier: records every call and applies ``transform``."""

    def __init__(self, transform: Callable[[str], str] = lambda code: code) -> None:
        self.transform = transform
        self.calls: list[tuple[str, str, str | None]] = []

    def format(self, code: str, filepath: str, config: str | None = None) -> str:
        self.calls.append((code, filepath, config))
        return self.transform(code)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def typescript_parser() -> TreeSitterDialectParser:
    """Return the tree-sitter backed AssemblyScript parser."""
    return TreeSitterDialectParser()


@pytest.fixture
def identity_formatter() -> FakeFormatter:
    """Return a formatter that leaves its input untouched."""
    return FakeFormatter()


@pytest.fixture
def make_formatter() -> Callable[[Callable[[str], str]], FakeFormatter]:
    """Return a factory for formatters applying a custom transform."""
    return FakeFormatter
