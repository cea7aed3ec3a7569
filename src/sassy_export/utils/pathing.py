# src/sassy_export/utils/pathing.py

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class WorkingDirectory:
    """
    The two candidate roots for an export.

    ``cwd`` is the process working directory, ``env_root`` the directory
    announced by the shell ($PWD). They differ when the process changed
    directory after start-up or runs behind a symlinked path.
    """

    cwd: str
    env_root: Optional[str] = None

    @classmethod
    def from_process(cls) -> "WorkingDirectory":
        return cls(cwd=os.getcwd(), env_root=os.environ.get("PWD"))

    def root(self, use_env_root: bool) -> str:
        if use_env_root:
            if not self.env_root:
                raise OSError("PWD is not set; cannot resolve the environment root")
            return self.env_root
        return self.cwd


def resolve_output_path(root: Union[str, Path], path: str) -> Path:
    """
    Join *root* and *path*.

    A leading separator on *path* is dropped so that "/out/data.json" and
    "out/data.json" land in the same place. ".." segments are kept as given;
    the result is not confined to *root*.
    """
    relative = path.lstrip("/\\")
    return Path(root) / relative


def split_name(path: Union[str, Path]) -> tuple[str, str]:
    """
    Return (filename without extension, extension with dot).

        split_name("out/data.js")   -> ("data", ".js")
        split_name("out/data")      -> ("data", "")
    """
    p = Path(path)
    return p.stem, p.suffix
