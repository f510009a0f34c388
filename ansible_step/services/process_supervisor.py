from pathlib import Path
from typing import Mapping, TextIO

from ansible_step.clients.ansible_client import AnsibleClient
from ansible_step.models import BuiltCommand, ExecutionResult, FailureReason
from ansible_step.utils.logging import setup_logger


class ProcessSupervisor:
    def __init__(self, client: AnsibleClient | None = None):
        self.client: AnsibleClient = client or AnsibleClient()
        self.logger = setup_logger("ProcessSupervisor")

    def execute(
        self,
        command: BuiltCommand,
        working_directory: Path | str,
        sink: TextIO,
        base_env: Mapping[str, str] | None = None,
    ) -> ExecutionResult:
        """Run a built command to completion, then release its transient files.

        The command's environment overlay is applied on top of `base_env`,
        the job environment its options were expanded against.

        Teardown happens on every path. A KeyboardInterrupt is re-raised
        after teardown so the caller can finish cancelling the job.
        """
        try:
            exit_code = self.client.launch(command.arguments, command.environment, working_directory, sink, base_env)
        except OSError as e:
            self.logger.error(f"Failed to run {command.executable}: {e}")
            self.report(sink, f"FATAL: command execution failed: {e}")
            return ExecutionResult.failure(FailureReason.LAUNCH_FAILURE)
        except KeyboardInterrupt:
            self.logger.warning(f"Interrupted while waiting for {command.executable} ({FailureReason.INTERRUPTED})")
            raise
        finally:
            command.release(sink)

        if exit_code != 0:
            self.logger.error(f"{command.executable} exited with code {exit_code}")
            return ExecutionResult.failure(FailureReason.NON_ZERO_EXIT, exit_code=exit_code)
        return ExecutionResult.success()

    def report(self, sink: TextIO, message: str) -> None:
        try:
            sink.write(f"{message}\n")
        except OSError as e:
            self.logger.error(f"Cannot write to output sink: {e}")
