from pydantic.dataclasses import dataclass

from .credentials import CredentialRecord
from .installation import AnsibleInstallation
from .options import StepOptions

@dataclass(frozen=True)
class StepsFile:
    steps: list[StepOptions]

@dataclass(frozen=True)
class InstallationsFile:
    installations: list[AnsibleInstallation]

@dataclass(frozen=True)
class CredentialsFile:
    credentials: list[CredentialRecord]
