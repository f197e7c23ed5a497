"""List the entries of a directory, leaving out hidden ones."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Sequence


def visible_entries(path: str | os.PathLike[str] = ".") -> list[str]:
    """Names in ``path`` that do not start with a dot, in directory order."""
    return [name for name in os.listdir(path) if not name.startswith(".")]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ossim-listdir", description="List the visible entries of a directory."
    )
    parser.add_argument("directory", nargs="?", default=".")
    args = parser.parse_args(argv)
    try:
        names = visible_entries(args.directory)
    except OSError:
        print(f"Could not open directory: {args.directory}")
        return 1
    print("".join(f"{name}  " for name in names))
    return 0


if __name__ == "__main__":
    sys.exit(main())