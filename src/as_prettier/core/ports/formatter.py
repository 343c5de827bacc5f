from typing import Protocol


class CodeFormatter(Protocol):
    def format(self, code: str, filepath: str, config: str | None = None) -> str: ...
