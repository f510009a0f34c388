import os
from enum import StrEnum

from pydantic.dataclasses import dataclass


class AnsibleCommand(StrEnum):
    ANSIBLE = "ansible"
    ANSIBLE_PLAYBOOK = "ansible-playbook"


@dataclass(frozen=True)
class AnsibleInstallation:
    name: str
    home: str

    def get_executable(self, command: AnsibleCommand) -> str | None:
        path = os.path.join(os.path.expanduser(self.home), "bin", command.value)
        if os.path.isfile(path) and os.access(path, os.X_OK):
            return path
        return None
