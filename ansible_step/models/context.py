import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, TextIO


@dataclass(frozen=True)
class ExecutionContext:
    """What the host job hands to one invocation: its environment, workspace and log sink."""
    env: Mapping[str, str] = field(default_factory=lambda: dict(os.environ))
    workspace: Path = field(default_factory=Path.cwd)
    sink: TextIO = field(default_factory=lambda: sys.stdout)
