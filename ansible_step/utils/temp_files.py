import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, TextIO

logger = logging.getLogger(__name__)

OWNER_READ = 0o400
OWNER_READ_EXECUTE = 0o500


def write_private_file(lines: Iterable[str], prefix: str, suffix: str, mode: int = OWNER_READ) -> Path:
    """Write `lines` to a fresh temporary file only its owner can access.

    mkstemp creates the file with mode 0600 under a unique name, so it is
    never group or world readable, even before the final chmod.
    """
    fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix)
    path = Path(name)
    try:
        with os.fdopen(fd, "w") as f:
            for line in lines:
                f.write(f"{line}\n")
        os.chmod(path, mode)
    except BaseException:
        delete_temp_file(path)
        raise
    logger.debug(f"Created temporary file {path} with mode {oct(mode)}")
    return path


def delete_temp_file(path: Path | None, sink: TextIO | None = None) -> None:
    if path is None:
        return
    try:
        path.unlink(missing_ok=True)
        logger.debug(f"Deleted temporary file {path}")
    except OSError as e:
        logger.warning(f"Failed to delete temporary file {path}: {e}")
        if sink is not None:
            sink.write(f"WARNING: failed to delete temporary file {path}: {e}\n")
