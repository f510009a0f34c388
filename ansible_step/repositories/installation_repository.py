import logging
import os
import shutil

from ruamel.yaml import YAML
from ansible_step.models import AnsibleCommand, AnsibleInstallation, InstallationsFile
from ansible_step.utils.yaml_loader import get_yaml_instance

logger = logging.getLogger(__name__)


class InstallationRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[AnsibleInstallation]:
        if not os.path.isfile(self.file_path):
            return []
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
            if not data:
                return []
            try:
                parsed = InstallationsFile(**data)
                return parsed.installations
            except Exception as e:
                raise ValueError(f"Invalid installations file: {e}") from e

    def find_by_name(self, name: str) -> AnsibleInstallation | None:
        return next((i for i in self.find_all() if i.name == name), None)

    def resolve_executable(self, name: str | None, command: AnsibleCommand) -> str | None:
        if name:
            installation = self.find_by_name(name)
            if installation is None:
                logger.error(f"No Ansible installation named {name}")
                return None
            return installation.get_executable(command)

        installations = self.find_all()
        match installations:
            case []:
                return shutil.which(command.value)
            case [installation]:
                return installation.get_executable(command)
            case _:
                logger.error(f"{len(installations)} Ansible installations registered, a name is required")
                return None
