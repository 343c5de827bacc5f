from typing import Protocol

from as_prettier.models import DeclarationNode


class DialectParser(Protocol):
    def parse(self, code: str, file_name: str) -> DeclarationNode: ...
