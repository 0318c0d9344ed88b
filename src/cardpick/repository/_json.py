import json
from pathlib import Path
from typing import Any


def read_json_list(path: Path) -> list[Any]:
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array in {path}")
    return data
