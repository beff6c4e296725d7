"""Path and URI helpers for the limited virtual file system scheme."""

from __future__ import annotations

import re

LIMIT_SCHEME = "andsec-yun"
_SCHEME_SEPARATOR = "://"
_SLASH_RUN = re.compile(r"/{2,}")


def format_path(path: str) -> str:
    """Collapse repeated slashes and drop a single trailing slash.

    The root path ``"/"`` is returned unchanged.
    """
    if path == "/":
        return path
    collapsed = _SLASH_RUN.sub("/", path)
    if collapsed.endswith("/"):
        collapsed = collapsed[:-1]
    return collapsed


def path_from_location(location: str) -> str:
    """Return the normalised path named by a scheme URI or an absolute path.

    A location is either ``andsec-yun://`` followed by an absolute path, or an
    absolute path itself. Anything else raises :class:`ValueError`.
    """
    prefix_len = len(LIMIT_SCHEME) + len(_SCHEME_SEPARATOR)
    if (
        location.startswith(LIMIT_SCHEME)
        and len(location) > prefix_len
        and location[prefix_len] == "/"
    ):
        return format_path(location[prefix_len:])
    if location.startswith("/"):
        return format_path(location)
    raise ValueError(f"not a {LIMIT_SCHEME} location: {location!r}")


def is_limit_uri(uri: str) -> bool:
    """Tell whether *uri* uses the limit scheme and names something after it."""
    prefix_len = len(LIMIT_SCHEME) + len(_SCHEME_SEPARATOR)
    return uri.startswith(LIMIT_SCHEME) and len(uri) > prefix_len