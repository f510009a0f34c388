import shlex
from string import Template
from typing import Mapping


def expand(value: str | None, env: Mapping[str, str]) -> str:
    """Substitute $VAR and ${VAR} references from the job environment.

    Unknown references are left as-is and `$$` yields a literal `$`.
    No shell evaluation takes place.
    """
    if not value:
        return ""
    return Template(value).safe_substitute(env)


def expand_tokens(value: str | None, env: Mapping[str, str]) -> list[str]:
    expanded = expand(value, env)
    if not expanded.strip():
        return []
    return shlex.split(expanded)
