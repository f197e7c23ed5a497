"""Sort the lines of a file and drop duplicates, like ``sort | uniq``."""

from __future__ import annotations

import os
import sys
from typing import Sequence

StrPath = "str | os.PathLike[str]"


def sort_uniq(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> int:
    """Write the sorted, de-duplicated lines of ``source`` to ``destination``.

    Lines compare byte by byte. Returns the number of lines written.
    """
    with open(os.fspath(source), "rb") as infile:
        data = infile.read()
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    unique = sorted(set(lines))
    with open(os.fspath(destination), "wb") as outfile:
        outfile.writelines(line + b"\n" for line in unique)
    return len(unique)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("You can not enter more or less than 3 arguments.")
        return 0
    source, destination = args
    try:
        sort_uniq(source, destination)
    except OSError as exc:
        if exc.filename == os.fspath(source):
            print("Unable to open source file!!!")
        else:
            print("Unable to open destination file!!!")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())