from dataclasses import field
from typing import Annotated, Any, Literal

from pydantic import Field
from pydantic.dataclasses import dataclass

from .inventory import Inventory


@dataclass(frozen=True, kw_only=True)
class CommonOptions:
    installation_name: str | None = None
    inventory: Inventory | None = None
    credentials_id: str | None = None
    sudo: bool = False
    sudo_user: str = ""
    forks: Annotated[int, Field(gt=0)] = 5
    unbuffered_output: bool = True
    colorized_output: bool = False
    host_key_checking: bool = False
    additional_parameters: str = ""


@dataclass(frozen=True, kw_only=True)
class InvocationOptions(CommonOptions):
    """Ad-hoc command: `ansible <pattern> -m <module> -a <command>`."""
    kind: Literal["adhoc"] = "adhoc"
    host_pattern: str = ""
    module: str = ""
    command: str = ""


@dataclass(frozen=True, kw_only=True)
class PlaybookOptions(CommonOptions):
    kind: Literal["playbook"] = "playbook"
    playbook: str
    limit: str = ""
    tags: str = ""
    skipped_tags: str = ""
    start_at_task: str = ""
    extra_vars: dict[str, Any] = field(default_factory=dict)


StepOptions = Annotated[InvocationOptions | PlaybookOptions, Field(discriminator="kind")]
