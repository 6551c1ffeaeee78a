"""Command search path handling."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

PATH_PREFIX = "PATH="
DEFAULT_PATH = "/usr/local/bin:/usr/bin:/bin:/usr/sbin:/sbin"


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    return [word for word in text.split(sep) if word]


def _entries(envp: Iterable[str] | Mapping[str, str]) -> Iterable[str]:
    if isinstance(envp, Mapping):
        return (f"{key}={value}" for key, value in envp.items())
    return envp


def get_paths(envp: Iterable[str] | Mapping[str, str]) -> list[str]:
    """Return the search directories, each ending in ``/``.

    The first environment entry that contains ``PATH=`` is used, skipping
    its first five characters; without one, a default path is used.
    """
    entry = next((item for item in _entries(envp) if PATH_PREFIX in item), None)
    value = DEFAULT_PATH if entry is None else entry[len(PATH_PREFIX):]
    return [directory + "/" for directory in split_words(value, ":")]


def find_command(paths: Iterable[str], cmd: str) -> str | None:
    """Return the first ``path + cmd`` that exists and is executable."""
    for directory in paths:
        candidate = directory + cmd
        if os.path.exists(candidate) and os.access(candidate, os.X_OK):
            return candidate
    return None