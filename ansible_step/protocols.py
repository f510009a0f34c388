"""Contracts for the services the host job owns.

The invocation builder depends on these rather than on the YAML backed
repositories, so a CI host can plug in its own credential store or tool
registry.
"""

from typing import Protocol, runtime_checkable

from ansible_step.models import AnsibleCommand, ExecutionContext, SSHUserPrivateKey


@runtime_checkable
class CredentialResolver(Protocol):
    def resolve(self, credentials_id: str, context: ExecutionContext) -> SSHUserPrivateKey | None:
        """Return the private key material for `credentials_id`, or None if unknown."""
        ...


@runtime_checkable
class InstallationResolver(Protocol):
    def resolve_executable(self, name: str | None, command: AnsibleCommand) -> str | None:
        """Return the absolute path of `command` for installation `name`.

        When `name` is None the resolver picks its default installation.
        """
        ...
