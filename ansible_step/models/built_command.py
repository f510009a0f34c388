import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, TextIO

from ansible_step.utils.temp_files import delete_temp_file

logger = logging.getLogger(__name__)


@dataclass
class BuiltCommand:
    """A resolved invocation, consumed once by the process supervisor.

    `arguments` is the full argument vector, executable first.
    `environment` only holds the variables to overlay on the job environment.
    """
    executable: str
    arguments: list[str]
    environment: dict[str, str]
    key_file: Path | None = None
    teardown_hooks: list[Callable[[TextIO], None]] = field(default_factory=list)
    released: bool = field(default=False, init=False)

    def release(self, sink: TextIO) -> None:
        if self.released:
            return
        self.released = True
        for hook in self.teardown_hooks:
            try:
                hook(sink)
            except Exception as e:
                logger.warning(f"Teardown hook failed: {e}")
        delete_temp_file(self.key_file, sink)
