import os
import subprocess
import logging
from pathlib import Path
from typing import Mapping, TextIO

logger = logging.getLogger(__name__)

TERMINATE_GRACE_SECONDS = 10


class AnsibleClient:
    def __init__(self, base_env: Mapping[str, str] | None = None):
        self.base_env: Mapping[str, str] | None = base_env

    def merged_env(self, overlay: Mapping[str, str], base_env: Mapping[str, str] | None = None) -> dict[str, str]:
        if base_env is None:
            base_env = os.environ if self.base_env is None else self.base_env
        env = dict(base_env)
        env.update(overlay)
        return env

    def launch(
        self,
        args: list[str],
        env: Mapping[str, str],
        cwd: Path | str,
        sink: TextIO,
        base_env: Mapping[str, str] | None = None,
    ) -> int:
        """Run `args` in `cwd` and copy its combined output to `sink` as it arrives.

        Raises OSError when the process cannot be spawned or its output cannot
        be relayed. `env` is overlaid on `base_env`, which defaults to the
        client's own base environment or `os.environ`. An interrupt while
        waiting terminates the child before it is re-raised.
        """
        logger.info(f"Launching {args[0]} in {cwd}")
        with subprocess.Popen(
            args,
            cwd=cwd,
            env=self.merged_env(env, base_env),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            bufsize=1,
        ) as proc:
            try:
                for line in proc.stdout:
                    sink.write(line)
                    sink.flush()
                return proc.wait()
            except BaseException:
                self.terminate(proc)
                raise

    def terminate(self, proc: subprocess.Popen) -> None:
        if proc.poll() is not None:
            return
        logger.warning(f"Terminating process {proc.pid}")
        proc.terminate()
        try:
            proc.wait(timeout=TERMINATE_GRACE_SECONDS)
        except subprocess.TimeoutExpired:
            logger.warning(f"Process {proc.pid} ignored SIGTERM, killing it")
            proc.kill()
            proc.wait()
