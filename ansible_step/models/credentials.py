from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class SSHUserPrivateKey:
    id: str
    private_keys: tuple[str, ...]
    username: str = ""


@dataclass(frozen=True)
class CredentialRecord:
    id: str
    username: str = ""
    private_key: str | None = None
    private_key_file: str | None = None
