import logging
import os

from ruamel.yaml import YAML
from ansible_step.models import CredentialRecord, CredentialsFile, ExecutionContext, SSHUserPrivateKey
from ansible_step.utils.env import expand
from ansible_step.utils.yaml_loader import get_yaml_instance

logger = logging.getLogger(__name__)


class CredentialRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[CredentialRecord]:
        if not os.path.isfile(self.file_path):
            return []
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
            if not data:
                return []
            try:
                parsed = CredentialsFile(**data)
                return parsed.credentials
            except Exception as e:
                raise ValueError(f"Invalid credentials file: {e}") from e

    def find_by_id(self, id: str) -> CredentialRecord | None:
        return next((c for c in self.find_all() if c.id == id), None)

    def resolve(self, credentials_id: str, context: ExecutionContext) -> SSHUserPrivateKey | None:
        record = self.find_by_id(credentials_id)
        if record is None:
            return None

        if record.private_key:
            keys = [record.private_key.rstrip("\n")]
        elif record.private_key_file:
            key_path = os.path.expanduser(expand(record.private_key_file, context.env))
            try:
                with open(key_path, "r") as f:
                    keys = [f.read().rstrip("\n")]
            except OSError as e:
                logger.error(f"Cannot read private key file for credentials {credentials_id}: {e}")
                return None
        else:
            logger.warning(f"Credentials {credentials_id} hold no private key")
            return None

        return SSHUserPrivateKey(id=record.id, private_keys=tuple(keys), username=record.username)
