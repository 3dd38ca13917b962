"""${ENV_VAR} and ${ENV_VAR:-default} interpolation for raw config data.

A reference with a default never counts as missing; the default applies when
the variable is unset or empty, as in a POSIX shell. This is the only way a
development URL ends up in the config: someone has to write it down.
"""

import os
import re

_REFERENCE = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return every referenced variable that is unset and has no default, in order."""
    missing: list[str] = []
    for text in _strings(data):
        for match in _REFERENCE.finditer(text):
            name = match.group("name")
            if match.group("default") is not None or name in os.environ:
                continue
            if name not in missing:
                missing.append(name)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """
    Return a copy of data with every reference substituted.

    Call `collect_missing_vars` first; an unset variable without a default
    raises KeyError here.
    """
    if isinstance(data, str):
        return _REFERENCE.sub(_resolve, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data


def _resolve(match: re.Match[str]) -> str:
    name, default = match.group("name"), match.group("default")
    if default is None:
        return os.environ[name]
    return os.environ.get(name) or default


def _strings(data: RawValue) -> list[str]:
    if isinstance(data, str):
        return [data]
    if isinstance(data, list):
        return [text for item in data for text in _strings(item)]
    if isinstance(data, dict):
        return [text for value in data.values() for text in _strings(value)]
    return []
