"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class TagArgs:
    """Command line arguments for a numbering run."""

    verbose: bool
    quiet: bool
    log_file: Path | None


__all__ = ["TagArgs"]
