"""A registry that maps URI schemes to the files that handle them."""

from __future__ import annotations

import threading
from collections.abc import Callable

from .file import LimitFile, new_for_uri
from .paths import LIMIT_SCHEME

Lookup = Callable[[str], LimitFile]


class Vfs:
    """Resolves URIs to file objects through per-scheme lookup functions."""

    def __init__(self) -> None:
        self._lookups: dict[str, Lookup] = {}
        self._lock = threading.Lock()

    @property
    def supported_uri_schemes(self) -> tuple[str, ...]:
        """The schemes registered so far, in registration order."""
        with self._lock:
            return tuple(self._lookups)

    def register_uri_scheme(self, scheme: str, lookup: Lookup) -> bool:
        """Register *lookup* for *scheme*.

        Returns ``False`` without changing anything if the scheme is
        already registered, ``True`` otherwise.
        """
        if not scheme:
            raise ValueError("scheme must not be empty")
        key = scheme.lower()
        with self._lock:
            if key in self._lookups:
                return False
            self._lookups[key] = lookup
            return True

    def file_for_uri(self, uri: str) -> LimitFile:
        """Return the file named by *uri* using the lookup for its scheme.

        Raises :class:`ValueError` when the URI has no scheme or the scheme
        is not registered.
        """
        scheme, separator, _ = uri.partition(":")
        if not separator or not scheme:
            raise ValueError(f"URI has no scheme: {uri!r}")
        with self._lock:
            lookup = self._lookups.get(scheme.lower())
        if lookup is None:
            raise ValueError(f"unsupported URI scheme: {scheme!r}")
        return lookup(uri)


_default_vfs: Vfs | None = None
_default_lock = threading.Lock()


def get_default_vfs() -> Vfs:
    """Return the process-wide :class:`Vfs`, creating it on first use."""
    global _default_vfs
    with _default_lock:
        if _default_vfs is None:
            _default_vfs = Vfs()
        return _default_vfs


def register_limit_scheme() -> None:
    """Register the limit scheme with the default VFS; later calls do nothing."""
    get_default_vfs().register_uri_scheme(LIMIT_SCHEME, new_for_uri)