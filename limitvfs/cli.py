"""List the root of the limit scheme, backed by a real directory."""

from __future__ import annotations

import argparse
import sys

from .root import get_root_uri, set_root_dir
from .vfs import get_default_vfs, register_limit_scheme

DEFAULT_ROOT = "/usr/local"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="limitvfs",
        description="List the entries visible at the root of the limit scheme.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=DEFAULT_ROOT,
        help=f"real directory to expose (default: {DEFAULT_ROOT})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Print each child of the scheme root with its URI and display name."""
    args = _parse_args(argv)

    register_limit_scheme()
    try:
        set_root_dir(args.root)
    except ValueError as exc:
        print(f"invalid root directory: {exc}", file=sys.stderr)
        return 2

    root = get_default_vfs().file_for_uri(get_root_uri())

    try:
        with root.enumerate_children(follow_symlinks=False) as children:
            for info in children:
                child = root.resolve_relative_path(info.display_name)
                child_uri = child.uri if child is not None else ""
                print(
                    f"==>file: {info.display_name}\n"
                    f"   uri: {child_uri}\n"
                    f"   display: {info.display_name}"
                )
    except (OSError, RuntimeError) as exc:
        print(f"get enumerator error: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())