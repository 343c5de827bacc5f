"""Checks on the declared dependency ranges."""

import tomllib
from pathlib import Path

_PYPROJECT = Path(__file__).parent.parent.parent / "pyproject.toml"


def test_language_pack_stays_below_runtime_download_releases() -> None:
    # 1.x fetches grammars over the network on first use
    with _PYPROJECT.open("rb") as fh:
        dependencies = tomllib.load(fh)["project"]["dependencies"]

    (requirement,) = [dep for dep in dependencies if dep.startswith("tree-sitter-language-pack")]
    assert "<1" in requirement.split(",")
