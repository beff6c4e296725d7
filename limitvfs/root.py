"""The real directory that the limit scheme exposes."""

from __future__ import annotations

import os

from .paths import LIMIT_SCHEME

# Room for the path itself, the appended slash and a terminator.
_PATH_MAX = 4096

_root_dir = ""


def set_root_dir(root_dir: str) -> None:
    """Set the real directory behind the scheme; a trailing slash is ensured."""
    global _root_dir
    if not root_dir:
        raise ValueError("root directory must not be empty")
    if len(os.fsencode(root_dir)) + 2 > _PATH_MAX:
        raise ValueError("root directory is too long")
    _root_dir = root_dir if root_dir.endswith("/") else root_dir + "/"


def get_root_path() -> str:
    """Return the configured root directory, or an empty string if unset."""
    return _root_dir


def get_root_uri() -> str:
    """Return the URI of the root of the scheme."""
    return f"{LIMIT_SCHEME}:///"


def reset_root_dir() -> str:
    """Forget the configured root directory and return the one that was set."""
    global _root_dir
    previous, _root_dir = _root_dir, ""
    return previous