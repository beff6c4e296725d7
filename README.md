# limitvfs

`limitvfs` provides a virtual file system scheme, `andsec-yun://`, that
exposes one real directory as the root `/` of a virtual tree. Files seen
through the scheme report paths inside that tree. Their metadata comes from
the real files underneath. Every entry is marked virtual, not hidden, not a
backup and not volatile. It can be deleted but cannot be trashed, written or
renamed.

## Installation

```sh
pip install .
```

To run the tests:

```sh
pip install ".[test]"
pytest
```

## Usage

First set the real directory behind the virtual root. Then open locations by
URI or by path:

```python
from limitvfs.root import set_root_dir, get_root_uri
from limitvfs.file import new_for_uri, new_for_path

set_root_dir("/usr/local")          # stored as "/usr/local/"

root = new_for_uri(get_root_uri())  # "andsec-yun:///"
with root.enumerate_children(follow_symlinks=False) as entries:
    for info in entries:
        child = root.resolve_relative_path(info.display_name)
        print(info.name, info.file_type.name, info.size, child.uri)

bin_dir = new_for_path("/bin")
print(bin_dir.uri)                  # "andsec-yun:///bin"
```

### `limitvfs.root`

- `set_root_dir(root_dir)` sets the real directory and adds a trailing slash
  if it is missing. It raises `ValueError` if the value is empty or too long.
- `get_root_path()` returns the configured directory, or `""` if none is set.
- `get_root_uri()` returns `"andsec-yun:///"`.
- `reset_root_dir()` clears the setting and returns the previous value.

### `limitvfs.file`

- `new_for_uri(uri)` and `new_for_path(path)` create a `LimitFile`. They
  raise `ValueError` for anything that is not a scheme URI or an absolute
  path.
- `LimitFile` has the properties `path`, `uri`, `basename`, `uri_scheme` and
  `is_native`. Two files compare equal, and hash alike, when their URIs
  match. It also has these methods:
  - `dup()` returns a new file for the same location.
  - `parent()` always returns `None`, because the scheme has no parents.
  - `has_uri_scheme(scheme)` tells whether `scheme` starts with
    `andsec-yun`.
  - `resolve_relative_path(relative_path)` resolves against the root, or
    re-bases a path that starts with the configured root directory. In any
    other case it returns `None`.
  - `get_child_for_display_name(display_name)` always raises `OSError`.
  - `query_info(follow_symlinks=True)` returns a `FileInfo` for the real file
    behind this one. It raises `OSError` if that file cannot be examined.
  - `query_filesystem_info()` returns `None` once a root is set. Before that,
    it describes the current working directory.
  - `enumerate_children(follow_symlinks=True)` returns a
    `LimitFileEnumerator`.
- `LimitFileEnumerator` is an iterator and context manager that yields one
  `FileInfo` per child. It raises `RuntimeError` if no root directory is set.
  Iterating after `close()` raises `ValueError`.
- `FileInfo` is a frozen dataclass holding the name, display, edit and copy
  names, a `FileType` value, the size, the symlink flag, the real `file://`
  target URI and the fixed flags described above.

### `limitvfs.paths`

- `format_path(path)` collapses repeated slashes and drops a trailing slash.
  For example `"/a//b/"` becomes `"/a/b"`, and `"/"` stays `"/"`.
- `path_from_location(location)` accepts an `andsec-yun://` URI or an
  absolute path and returns the normalised path. For anything else it raises
  `ValueError`.
- `is_limit_uri(uri)` tells whether a string uses the scheme and names
  something after `andsec-yun://`.

### `limitvfs.vfs`

`Vfs` maps URI schemes to lookup functions:

- `register_uri_scheme(scheme, lookup)` returns `False` if the scheme is
  already registered.
- `file_for_uri(uri)` raises `ValueError` for a missing or unregistered
  scheme.
- `supported_uri_schemes` lists the registered schemes.

`get_default_vfs()` returns the process-wide instance. `register_limit_scheme()`
registers `andsec-yun` with it.

```python
from limitvfs.vfs import get_default_vfs, register_limit_scheme

register_limit_scheme()
location = get_default_vfs().file_for_uri("andsec-yun:///bin")
```

## Command line

The `limitvfs` command lists the entries at the virtual root. By default the
root is backed by `/usr/local`; you can pass another directory instead. For
each entry it prints the name, its `andsec-yun` URI and its display name:

```sh
limitvfs
limitvfs /srv/data
```

If the listing fails, the command writes the error to standard error and
exits with status 2.

## What it does not do

The scheme is read-only in practice. There are no operations to create,
write, copy, move, rename or delete files. The package does not hook into any
desktop or operating-system file layer; URIs resolve only through
`limitvfs.vfs.Vfs`.