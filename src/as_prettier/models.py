from enum import Enum

from pydantic import BaseModel


class NodeKind(str, Enum):
    SOURCE = "source"
    CLASS = "class"
    INTERFACE = "interface"
    NAMESPACE = "namespace"
    ENUM = "enum"
    METHOD = "method"
    FUNCTION = "function"


class DecoratorRange(BaseModel):
    start: int
    end: int


class DeclarationNode(BaseModel):
    kind: NodeKind
    name: str | None = None
    members: list["DeclarationNode"] | None = None
    decorators: list[DecoratorRange] | None = None


DeclarationNode.model_rebuild()  # necessary for recursive types


class FormatOptions(BaseModel):
    config: str | None = None
    cwd: str | None = None
