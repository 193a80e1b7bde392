"""
I/O utilities for the guide corpus.

The corpus is a single JSON array rewritten wholesale by every stage; writes go
through a ``.partial`` sibling that is renamed over the target so a crashed
stage never leaves a truncated corpus behind.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, List, Optional

import pandas as pd


def read_json_array(path: Path) -> List[Any]:
    """Load a JSON array; missing files and non-array payloads are errors."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Corpus file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array.")
    return data


def read_optional_json_array(path: Optional[Path]) -> Optional[List[Any]]:
    if path is None or not Path(path).is_file():
        return None
    return read_json_array(path)


def write_json_atomic(path: Path, data: Any) -> Path:
    """Pretty-print ``data`` (two-space indent, trailing newline) and swap it into place."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = target.with_suffix(target.suffix + ".partial")
    if tmp_path.exists():
        tmp_path.unlink()
    tmp_path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    os.replace(tmp_path, target)
    return target


def write_csv(df: pd.DataFrame, csv_path: Path) -> None:
    """Write DataFrame to CSV."""
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(csv_path, index=False)


__all__ = [
    "read_json_array",
    "read_optional_json_array",
    "write_json_atomic",
    "write_csv",
]
