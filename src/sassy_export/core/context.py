from __future__ import annotations
from dataclasses import dataclass

from sassy_export.values import SassMap


@dataclass(frozen=True)
class ExportRequest:
    """
    One export call.
    Built from validated arguments and consumed once by the Exporter.
    """

    output_path: str
    data: SassMap

    pretty: bool = False
    debug: bool = False
    use_env_root: bool = False
