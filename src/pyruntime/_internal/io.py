"""JSON loading and canonical serialization for inputs, configuration and results."""

import json
from pathlib import Path
from typing import Any, Dict


def load_json(path: Path) -> Dict:
    """Load a JSON object from file.

    Raises:
        ValueError: if the document is not a JSON object
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return data


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization for byte-stable output.

    Sorted keys, compact separators, UTF-8. Lists keep their order, which for
    DepSets is already the stable iteration order.
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False
    )


def write_canonical(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(canonical_dumps(obj) + "\n", encoding="utf-8")
