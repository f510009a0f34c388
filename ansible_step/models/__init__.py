from .built_command import BuiltCommand
from .context import ExecutionContext
from .credentials import CredentialRecord, SSHUserPrivateKey
from .installation import AnsibleCommand, AnsibleInstallation
from .inventory import InlineHosts, Inventory, InventoryContent, InventoryFile, InventoryScript
from .options import CommonOptions, InvocationOptions, PlaybookOptions, StepOptions
from .result import ExecutionResult, FailureReason
from .wrappers import CredentialsFile, InstallationsFile, StepsFile

__all__ = [
    "AnsibleCommand",
    "AnsibleInstallation",
    "BuiltCommand",
    "CommonOptions",
    "CredentialRecord",
    "CredentialsFile",
    "ExecutionContext",
    "ExecutionResult",
    "FailureReason",
    "InlineHosts",
    "InstallationsFile",
    "Inventory",
    "InventoryContent",
    "InventoryFile",
    "InventoryScript",
    "InvocationOptions",
    "PlaybookOptions",
    "SSHUserPrivateKey",
    "StepOptions",
    "StepsFile",
]
