"""Target directory and package name normalization."""

from __future__ import annotations

import os
import re
from pathlib import Path

_SEPARATORS = "".join(sorted({"/", os.sep}))
_TRAILING_RE = re.compile(rf"[\s{re.escape(_SEPARATORS)}]+\Z")

_PACKAGE_NAME_RE = re.compile(r"(?:@[a-z0-9\-*~][a-z0-9\-*._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*")
_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_DOT_RE = re.compile(r"^[._]")
_INVALID_CHARS_RE = re.compile(r"[^a-z0-9\-~]+")


def normalize_target_dir(raw: str | None) -> str | None:
    """Trim *raw* and drop any trailing run of path separators.

    Returns ``None`` for ``None``. Whitespace caught between trailing separators
    is dropped with them, so applying the function twice changes nothing.
    """
    if raw is None:
        return None
    return _TRAILING_RE.sub("", raw.strip())


def is_valid_package_name(name: str) -> bool:
    return _PACKAGE_NAME_RE.fullmatch(name) is not None


def to_valid_package_name(name: str) -> str:
    """Coerce a project name into something ``is_valid_package_name`` accepts.

    Inputs made only of characters that get stripped (``"."``, ``"_"``,
    whitespace) collapse to ``""``, which is not a valid name.
    """
    candidate = _WHITESPACE_RE.sub("-", name.strip().lower())
    candidate = _LEADING_DOT_RE.sub("", candidate)
    return _INVALID_CHARS_RE.sub("-", candidate)


def project_name_for(target_dir: str, cwd: Path) -> str:
    """Project name implied by *target_dir*; ``.`` means the current directory's name."""
    if target_dir == ".":
        return cwd.resolve().name
    return target_dir
