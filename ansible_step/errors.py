from ansible_step.models.result import FailureReason


class AnsibleInvocationError(Exception):
    reason: FailureReason = FailureReason.INVALID_OPTIONS


class ToolNotFoundError(AnsibleInvocationError):
    reason = FailureReason.TOOL_NOT_FOUND


class CredentialNotFoundError(AnsibleInvocationError):
    reason = FailureReason.CREDENTIAL_NOT_FOUND
