from typing import Annotated, Literal

from pydantic import Field
from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class InlineHosts:
    """Comma separated host list handed straight to `-i`."""
    hosts: str
    kind: Literal["inline"] = "inline"


@dataclass(frozen=True)
class InventoryFile:
    path: str
    kind: Literal["file"] = "file"


@dataclass(frozen=True)
class InventoryContent:
    """Inventory text materialized as a temporary file for one invocation."""
    content: str
    dynamic: bool = False
    kind: Literal["content"] = "content"


@dataclass(frozen=True)
class InventoryScript:
    """Dynamic inventory script invoked with extra arguments."""
    path: str
    arguments: tuple[str, ...] = ()
    kind: Literal["script"] = "script"


Inventory = Annotated[
    InlineHosts | InventoryFile | InventoryContent | InventoryScript,
    Field(discriminator="kind"),
]
