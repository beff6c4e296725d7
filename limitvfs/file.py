"""Files of the limit scheme and enumeration of their children."""

from __future__ import annotations

import enum
import errno
import os
import stat
from dataclasses import dataclass

from .paths import LIMIT_SCHEME, format_path, is_limit_uri, path_from_location
from .root import get_root_path

_URI_PREFIX_LEN = len(LIMIT_SCHEME) + len("://")

# Every file's parent is looked up at this location, which is not a scheme URI.
_PARENT_LOCATION = "/"


class FileType(enum.IntEnum):
    """Kinds of file reported in :class:`FileInfo`."""

    UNKNOWN = 0
    REGULAR = 1
    DIRECTORY = 2
    SYMBOLIC_LINK = 3
    SPECIAL = 4
    SHORTCUT = 5
    MOUNTABLE = 6


@dataclass(frozen=True)
class FileInfo:
    """Attributes of a file as presented through the limit scheme."""

    name: str
    display_name: str
    edit_name: str
    copy_name: str
    file_type: FileType
    size: int
    is_symlink: bool
    target_uri: str
    is_virtual: bool = True
    is_hidden: bool = False
    is_backup: bool = False
    is_volatile: bool = False
    can_delete: bool = True
    can_trash: bool = False
    can_write: bool = False
    can_rename: bool = False


def _file_type(mode: int) -> FileType:
    if stat.S_ISREG(mode):
        return FileType.REGULAR
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISLNK(mode):
        return FileType.SYMBOLIC_LINK
    if stat.S_ISCHR(mode) or stat.S_ISBLK(mode) or stat.S_ISFIFO(mode) or stat.S_ISSOCK(mode):
        return FileType.SPECIAL
    return FileType.UNKNOWN


def _real_path(virtual_path: str) -> str:
    """Map a path inside the scheme onto the real file system."""
    real = os.path.normpath(f"{get_root_path()}/{virtual_path}")
    if real.startswith("//"):
        real = "/" + real.lstrip("/")
    return real


def _display(name: str) -> str:
    return name.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")


def _query_real(real_path: str, target_uri: str, follow_symlinks: bool) -> FileInfo:
    link_stat = os.lstat(real_path)
    is_symlink = stat.S_ISLNK(link_stat.st_mode)
    st = link_stat
    if follow_symlinks and is_symlink:
        try:
            st = os.stat(real_path)
        except OSError:
            st = link_stat
    name = os.path.basename(real_path) or real_path
    display = _display(name)
    return FileInfo(
        name=name,
        display_name=display,
        edit_name=display,
        copy_name=display,
        file_type=_file_type(st.st_mode),
        size=st.st_size,
        is_symlink=is_symlink,
        target_uri=target_uri,
    )


class LimitFile:
    """A file addressed by the limit scheme, backed by the configured root."""

    __slots__ = ("_path",)

    def __init__(self, location: str) -> None:
        self._path = path_from_location(location)

    @property
    def path(self) -> str:
        """The normalised path inside the scheme."""
        return self._path

    @property
    def uri(self) -> str:
        """The scheme URI of this file."""
        return f"{LIMIT_SCHEME}://{self._path}"

    @property
    def basename(self) -> str:
        """The last component of the path; empty for the root."""
        return self._path.rsplit("/", 1)[-1]

    @property
    def uri_scheme(self) -> str:
        return LIMIT_SCHEME

    @property
    def is_native(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LimitFile):
            return NotImplemented
        return self.uri == other.uri

    def __hash__(self) -> int:
        return hash(self.uri)

    def __repr__(self) -> str:
        return f"LimitFile({self.uri!r})"

    def dup(self) -> LimitFile:
        """Return a new file naming the same location."""
        return new_for_uri(self.uri)

    def parent(self) -> LimitFile | None:
        """Look up the parent; the scheme has none, so this yields ``None``."""
        try:
            return new_for_uri(_PARENT_LOCATION)
        except ValueError:
            return None

    def has_uri_scheme(self, scheme: str) -> bool:
        """Tell whether *scheme* starts with the limit scheme name."""
        return scheme.startswith(LIMIT_SCHEME)

    def resolve_relative_path(self, relative_path: str) -> LimitFile | None:
        """Resolve *relative_path* against this file.

        From the root the result is the path below the root. A file whose
        path starts with the configured root directory is re-based on it.
        Any other file resolves to ``None``.
        """
        if self._path == "/":
            return new_for_uri(f"{LIMIT_SCHEME}:///{relative_path}")
        root = get_root_path()
        if root and self._path.startswith(root):
            rebased = f"/{self._path[len(root) - 1:]}/{relative_path}"
            return new_for_path(format_path(rebased))
        return None

    def get_child_for_display_name(self, display_name: str) -> LimitFile:
        """Display names are not mapped to children; raises :class:`OSError`."""
        raise OSError(
            errno.ENOTSUP,
            f"cannot resolve display name {display_name!r} under {self.uri}",
        )

    def query_info(self, follow_symlinks: bool = True) -> FileInfo:
        """Return information about the real file behind this one.

        Raises :class:`OSError` when the real file cannot be examined.
        """
        target_uri = f"file://{get_root_path()}/{self._path}"
        return _query_real(_real_path(self._path), target_uri, follow_symlinks)

    def query_filesystem_info(self) -> FileInfo | None:
        """Return ``None`` once a root is set; otherwise describe the working directory."""
        if get_root_path():
            return None
        cwd = os.path.abspath("")
        return _query_real(cwd, f"file://{cwd}", True)

    def enumerate_children(self, follow_symlinks: bool = True) -> LimitFileEnumerator:
        """Return an enumerator over the children of this directory."""
        return LimitFileEnumerator(self, follow_symlinks)


class LimitFileEnumerator:
    """Iterates over the children of a :class:`LimitFile`, yielding :class:`FileInfo`."""

    def __init__(self, container: LimitFile, follow_symlinks: bool = True) -> None:
        if not get_root_path():
            raise RuntimeError("root directory is not set; call set_root_dir first")
        self.container = container
        self.follow_symlinks = follow_symlinks
        self.file_path = _real_path(container.path)
        self.file_uri = container.uri
        self._entries = os.scandir(self.file_path)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> LimitFileEnumerator:
        return self

    def __next__(self) -> FileInfo:
        if self._closed:
            raise ValueError("enumerator is closed")
        entry = next(self._entries)
        separator = "" if self.file_uri.endswith("/") else "/"
        child = new_for_uri(f"{self.file_uri}{separator}{entry.name}")
        # Children are always examined through their link targets.
        return child.query_info(follow_symlinks=True)

    def close(self) -> None:
        """Release the underlying directory listing."""
        if not self._closed:
            self._entries.close()
            self._closed = True

    def __enter__(self) -> LimitFileEnumerator:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def new_for_uri(uri: str) -> LimitFile:
    """Create a file from a limit-scheme URI; raises :class:`ValueError` otherwise."""
    if not is_limit_uri(uri):
        raise ValueError(f"not a {LIMIT_SCHEME} URI: {uri!r}")
    return LimitFile(uri[_URI_PREFIX_LEN:])


def new_for_path(path: str) -> LimitFile:
    """Create a file from an absolute path; raises :class:`ValueError` otherwise."""
    if not path.startswith("/"):
        raise ValueError(f"path must be absolute: {path!r}")
    return LimitFile(path)