"""Command line entry point: load a scene file and report its contents."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from cubmap.config import ConfigError, read_config


def _error(message: str) -> int:
    sys.stderr.write(f"Error\n{message}\n")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the single scene file named in *argv* and print what it holds."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _error("Invalid Arguments")
    out = sys.stdout
    try:
        config = read_config(args[0])
    except ConfigError as error:
        if error.text is not None:
            out.write(f"{error.text}\n\n")
            out.flush()
        return _error(error.message)
    out.write(f"{config.source}\n\n")
    out.write(f"{config.masked}\n\n")
    out.write(f"N Text: {config.north}\n")
    out.write(f"S Text: {config.south}\n")
    out.write(f"E Text: {config.east}\n")
    out.write(f"O Text: {config.west}\n")
    out.write(f"Ceiling color: {config.ceiling}\n")
    out.write(f"floor color: {config.floor}\n")
    shown_map = config.map if config.map is not None else "(null)"
    out.write(f"map:\n{shown_map}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())