import json
from pathlib import Path
from typing import Any

from returns.result import Result, safe


@safe
def _read_json(file_path: Path) -> Any:
    with file_path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def load_json(file_path: Path) -> Result[Any, str]:
    """Parse a JSON file, capturing I/O and decode errors as a failure message."""
    return _read_json(file_path).alt(str)
