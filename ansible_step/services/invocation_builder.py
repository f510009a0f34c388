import json
from pathlib import Path
from typing import Any

from ansible_step.errors import AnsibleInvocationError, CredentialNotFoundError, ToolNotFoundError
from ansible_step.models import (
    AnsibleCommand,
    BuiltCommand,
    ExecutionContext,
    InvocationOptions,
    PlaybookOptions,
    SSHUserPrivateKey,
)
from ansible_step.models.options import CommonOptions
from ansible_step.protocols import CredentialResolver, InstallationResolver
from ansible_step.services.inventory_handler import InventoryHandler
from ansible_step.utils.env import expand, expand_tokens
from ansible_step.utils.logging import setup_logger
from ansible_step.utils.temp_files import OWNER_READ, write_private_file

DEFAULT_HOST_PATTERN = "all"


class InvocationBuilder:
    """Turns step options into an argument vector, an environment overlay and
    the transient files the invocation needs.

    Nothing is spawned here. On success the returned command owns the private
    key file and the inventory teardown hook; `BuiltCommand.release` must be
    called once the process is done. If building fails, everything created so
    far is released before the error propagates.
    """

    def __init__(self, installations: InstallationResolver, credentials: CredentialResolver):
        self.installations: InstallationResolver = installations
        self.credentials: CredentialResolver = credentials
        self.logger = setup_logger("InvocationBuilder")

    def build(self, options: CommonOptions, context: ExecutionContext) -> BuiltCommand:
        match options:
            case InvocationOptions():
                tool = AnsibleCommand.ANSIBLE
            case PlaybookOptions():
                tool = AnsibleCommand.ANSIBLE_PLAYBOOK
            case _:
                raise AnsibleInvocationError(f"Unsupported options: {type(options).__name__}")

        exe = self.resolve_executable(options.installation_name, tool)
        credentials = self.resolve_credentials(options.credentials_id, context)

        inventory = InventoryHandler(options.inventory)
        command = BuiltCommand(
            executable=exe,
            arguments=[exe],
            environment=self.build_environment(options),
            teardown_hooks=[inventory.tear_down],
        )
        try:
            match options:
                case InvocationOptions():
                    self.add_adhoc_arguments(command.arguments, options, inventory, context)
                case PlaybookOptions():
                    self.add_playbook_arguments(command.arguments, options, inventory, context)

            self.add_common_arguments(command.arguments, options, context)

            if credentials is not None:
                command.key_file = self.create_ssh_key_file(credentials)
                command.arguments.extend(["--private-key", str(command.key_file)])

            if isinstance(options, PlaybookOptions):
                for key, value in options.extra_vars.items():
                    command.arguments.extend(["-e", self.render_extra_var(key, value, context)])

            command.arguments.extend(expand_tokens(options.additional_parameters, context.env))
        except BaseException:
            command.release(context.sink)
            raise

        self.logger.debug(f"Built command: {command.arguments}")
        return command

    def resolve_executable(self, name: str | None, tool: AnsibleCommand) -> str:
        exe = self.installations.resolve_executable(name or None, tool)
        if not exe:
            installation = name or "default"
            raise ToolNotFoundError(
                f"{tool.value} executable not found for installation '{installation}', check your installation."
            )
        return exe

    def resolve_credentials(self, credentials_id: str | None, context: ExecutionContext) -> SSHUserPrivateKey | None:
        if not credentials_id or not credentials_id.strip():
            return None
        credentials = self.credentials.resolve(credentials_id, context)
        if credentials is None:
            raise CredentialNotFoundError(f"Credentials '{credentials_id}' not found")
        return credentials

    def add_adhoc_arguments(
        self, args: list[str], options: InvocationOptions, inventory: InventoryHandler, context: ExecutionContext
    ) -> None:
        host_pattern = expand(options.host_pattern, context.env).strip()
        if not host_pattern:
            if not inventory.selects_targets:
                raise AnsibleInvocationError("Host pattern must not be empty")
            host_pattern = DEFAULT_HOST_PATTERN
        module = expand(options.module, context.env)
        module_command = expand(options.command, context.env)

        args.append(host_pattern)
        inventory.add_arguments(args, context.env, context.sink)
        if module:
            args.extend(["-m", module])
        if module_command:
            args.extend(["-a", module_command])

    def add_playbook_arguments(
        self, args: list[str], options: PlaybookOptions, inventory: InventoryHandler, context: ExecutionContext
    ) -> None:
        playbook = expand(options.playbook, context.env).strip()
        if not playbook:
            raise AnsibleInvocationError("Playbook path must not be empty")

        args.append(playbook)
        inventory.add_arguments(args, context.env, context.sink)
        for flag, value in (
            ("-l", options.limit),
            ("-t", options.tags),
            ("--skip-tags", options.skipped_tags),
            ("--start-at-task", options.start_at_task),
        ):
            expanded = expand(value, context.env)
            if expanded:
                args.extend([flag, expanded])

    def render_extra_var(self, key: str, value: Any, context: ExecutionContext) -> str:
        # key=value only carries strings; anything else is sent as a JSON object to keep its type
        if isinstance(value, str):
            return f"{key}={expand(value, context.env)}"
        return expand(json.dumps({key: value}), context.env)

    def add_common_arguments(self, args: list[str], options: CommonOptions, context: ExecutionContext) -> None:
        if options.sudo:
            args.append("-S")
            sudo_user = expand(options.sudo_user, context.env)
            if sudo_user:
                args.extend(["-R", sudo_user])
        args.extend(["-f", str(options.forks)])

    def build_environment(self, options: CommonOptions) -> dict[str, str]:
        env = {}
        if options.unbuffered_output:
            env["PYTHONUNBUFFERED"] = "1"
        if options.colorized_output:
            env["ANSIBLE_FORCE_COLOR"] = "true"
        if not options.host_key_checking:
            env["ANSIBLE_HOST_KEY_CHECKING"] = "False"
        return env

    def create_ssh_key_file(self, credentials: SSHUserPrivateKey) -> Path:
        key_file = write_private_file(credentials.private_keys, prefix="ssh", suffix="key", mode=OWNER_READ)
        self.logger.info(f"Wrote private key for credentials {credentials.id} to a temporary file")
        return key_file
