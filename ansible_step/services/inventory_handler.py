import logging
import shlex
from pathlib import Path
from typing import Mapping, TextIO

from ansible_step.models import InlineHosts, Inventory, InventoryContent, InventoryFile, InventoryScript
from ansible_step.utils.env import expand
from ansible_step.utils.temp_files import OWNER_READ, OWNER_READ_EXECUTE, delete_temp_file, write_private_file

logger = logging.getLogger(__name__)


class InventoryHandler:
    """Renders one inventory source as `-i` arguments and releases what it created."""

    def __init__(self, inventory: Inventory | None):
        self.inventory: Inventory | None = inventory
        self.temp_file: Path | None = None

    @property
    def selects_targets(self) -> bool:
        return isinstance(self.inventory, InlineHosts)

    def add_arguments(self, args: list[str], env: Mapping[str, str], sink: TextIO) -> None:
        match self.inventory:
            case None:
                return
            case InlineHosts(hosts=hosts):
                host_list = expand(hosts, env).strip()
                if not host_list.endswith(","):
                    host_list += ","
                args.extend(["-i", host_list])
            case InventoryFile(path=path):
                args.extend(["-i", expand(path, env)])
            case InventoryContent(content=content, dynamic=dynamic):
                mode = OWNER_READ_EXECUTE if dynamic else OWNER_READ
                self.temp_file = write_private_file(
                    expand(content, env).splitlines(), prefix="inventory", suffix=".ini", mode=mode
                )
                args.extend(["-i", str(self.temp_file)])
            case InventoryScript(path=path, arguments=arguments):
                command = [expand(path, env)] + [expand(a, env) for a in arguments]
                wrapper = ["#!/bin/sh", f'exec {shlex.join(command)} "$@"']
                self.temp_file = write_private_file(wrapper, prefix="inventory", suffix=".sh", mode=OWNER_READ_EXECUTE)
                args.extend(["-i", str(self.temp_file)])
            case _:
                raise TypeError(f"Unsupported inventory: {self.inventory!r}")
        logger.debug(f"Inventory arguments: {args[-2:]}")

    def tear_down(self, sink: TextIO) -> None:
        match self.inventory:
            case InventoryContent() | InventoryScript():
                delete_temp_file(self.temp_file, sink)
                self.temp_file = None
            case _:
                pass
