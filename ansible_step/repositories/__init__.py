from .credentials_repository import CredentialRepository
from .installation_repository import InstallationRepository
from .steps_repository import StepRepository

__all__ = [
    'CredentialRepository',
    'InstallationRepository',
    'StepRepository',
]
