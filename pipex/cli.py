"""Command line entry point: pipex infile cmd1 cmd2 outfile."""

from __future__ import annotations

import sys
from typing import Sequence

from pipex.execute import RST, YLW, run_pipeline

__all__ = ["main"]

USAGE = "./pipex infile cmd1 cmd2 outfile"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pipeline described by argv and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write(f"{YLW}Usage: {RST}{USAGE}\n")
        return 1
    infile, cmd1, cmd2, outfile = args
    run_pipeline(infile, cmd1, cmd2, outfile)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())