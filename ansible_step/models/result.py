from enum import StrEnum

from pydantic.dataclasses import dataclass


class FailureReason(StrEnum):
    INVALID_OPTIONS = "invalid_options"
    TOOL_NOT_FOUND = "tool_not_found"
    CREDENTIAL_NOT_FOUND = "credential_not_found"
    LAUNCH_FAILURE = "launch_failure"
    NON_ZERO_EXIT = "non_zero_exit"
    INTERRUPTED = "interrupted"


@dataclass(frozen=True)
class ExecutionResult:
    succeeded: bool
    exit_code: int | None = None
    failure_reason: FailureReason | None = None

    @classmethod
    def success(cls) -> "ExecutionResult":
        return cls(succeeded=True, exit_code=0)

    @classmethod
    def failure(cls, reason: FailureReason, exit_code: int | None = None) -> "ExecutionResult":
        return cls(succeeded=False, exit_code=exit_code, failure_reason=reason)
