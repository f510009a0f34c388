import json
import os
import sys
from pathlib import Path
from typing import TextIO

from typing_extensions import override

from ansible_step.errors import AnsibleInvocationError
from ansible_step.models import ExecutionContext, ExecutionResult, FailureReason
from ansible_step.models.options import CommonOptions
from ansible_step.repositories import CredentialRepository, InstallationRepository, StepRepository
from ansible_step.services.invocation_builder import InvocationBuilder
from ansible_step.services.process_supervisor import ProcessSupervisor
from ansible_step.services.service import Service
from ansible_step.utils.logging import setup_logger


class AnsibleStepService(Service):
    def __init__(
        self,
        steps_file: str,
        installations_file: str,
        credentials_file: str,
        workspace: str | None = None,
        dry_run: bool = False,
        sink: TextIO | None = None,
    ):
        self.steps: StepRepository = StepRepository(steps_file)
        self.builder: InvocationBuilder = InvocationBuilder(
            InstallationRepository(installations_file), CredentialRepository(credentials_file)
        )
        self.supervisor: ProcessSupervisor = ProcessSupervisor()
        self.logger = setup_logger("AnsibleStepService")
        self.workspace: Path = Path(workspace) if workspace else Path.cwd()
        self.dry_run: bool = dry_run
        self.sink: TextIO | None = sink

    def get_context(self) -> ExecutionContext:
        return ExecutionContext(env=dict(os.environ), workspace=self.workspace, sink=self.sink or sys.stdout)

    @override
    def run(self) -> None:
        steps = self.steps.find_all()
        if not steps:
            self.logger.info("No Ansible steps configured")
            return

        context = self.get_context()
        for index, options in enumerate(steps, start=1):
            self.logger.info(f"Running Ansible step {index}/{len(steps)} ({options.kind})")
            result = self.perform(options, context)
            if not result.succeeded:
                self.logger.error(f"Ansible step {index} failed: {result.failure_reason}")
                raise RuntimeError(f"Ansible step {index} failed")

    def perform(self, options: CommonOptions, context: ExecutionContext) -> ExecutionResult:
        try:
            command = self.builder.build(options, context)
        except AnsibleInvocationError as e:
            self.logger.error(str(e))
            context.sink.write(f"FATAL: {e}\n")
            return ExecutionResult.failure(e.reason)
        except ValueError as e:
            self.logger.error(f"Invalid configuration: {e}")
            context.sink.write(f"FATAL: {e}\n")
            return ExecutionResult.failure(FailureReason.INVALID_OPTIONS)
        except OSError as e:
            self.logger.error(f"Failed to prepare invocation: {e}")
            context.sink.write(f"FATAL: failed to prepare invocation: {e}\n")
            return ExecutionResult.failure(FailureReason.LAUNCH_FAILURE)

        if self.dry_run:
            try:
                context.sink.write(json.dumps({"args": command.arguments, "env": command.environment}) + "\n")
            finally:
                command.release(context.sink)
            return ExecutionResult.success()

        return self.supervisor.execute(command, context.workspace, context.sink, context.env)
