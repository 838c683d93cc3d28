"""Reading and writing fingerprint JSON files."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

__all__ = ["read_json", "write_json", "ensure_parent_dir"]


def read_json(path: str | Path) -> Dict[str, Any]:
    """Decode the JSON document stored at ``path``.

    A missing file raises ``FileNotFoundError``; malformed content raises
    ``ValueError`` naming the file.
    """

    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        try:
            return json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in '{file_path}': {exc}") from exc


def ensure_parent_dir(path: str | Path) -> Path:
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    return file_path


def write_json(path: str | Path, obj: Dict[str, Any]) -> None:
    """Write ``obj`` to ``path``, keeping key order so fingerprints stay readable."""

    with ensure_parent_dir(path).open("w", encoding="utf-8") as handle:
        json.dump(obj, handle, ensure_ascii=False, indent=2)
        handle.write("\n")
