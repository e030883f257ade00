"""
Helpers for saving / loading benchmark summaries.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict


class ResultStore:
    """
    Very thin wrapper around JSON until we need something fancier.
    """

    def __init__(self, root_dir: str | Path):
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

    # ---------------- Summaries ---------------- #

    def save_json(self, data: Dict[str, Any], name: str) -> Path:
        path = self.root_dir / f"{name}.json"
        with path.open("w") as fh:
            json.dump(data, fh, indent=2)
        return path

    def load_json(self, name: str) -> Dict[str, Any]:
        path = self.root_dir / f"{name}.json"
        with path.open() as fh:
            return json.load(fh)
