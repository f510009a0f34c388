import os

from ruamel.yaml import YAML
from ansible_step.models import StepsFile
from ansible_step.models.options import CommonOptions
from ansible_step.utils.yaml_loader import get_yaml_instance


class StepRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[CommonOptions]:
        if not os.path.isfile(self.file_path):
            return []
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
            if not data:
                return []
            try:
                parsed = StepsFile(**data)
                return parsed.steps
            except Exception as e:
                raise ValueError(f"Invalid steps file: {e}") from e
