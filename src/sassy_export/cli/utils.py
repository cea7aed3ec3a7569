from __future__ import annotations

import time
from pathlib import Path

from rich.console import Console

from sassy_export.loader import load_data_file
from sassy_export.values import SassMap

console = Console()


def load_data(path: Path, *, verbose: bool = False) -> SassMap:
    """
    Load a YAML/JSON data file into a SassMap.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    data = load_data_file(path)

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded {path} ({len(data)} top-level keys) in {elapsed:.2f}s")

    return data
