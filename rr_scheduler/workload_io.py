from __future__ import annotations

import csv
import json
import re
from pathlib import Path
from typing import List, Mapping, Union

from .errors import InvalidArgumentError
from .models import Process

_INT_TEXT = re.compile(r"^\s*-?\d+\s*$")


def load_workload(path: Union[str, Path]) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)

    raise InvalidArgumentError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except UnicodeDecodeError as exc:
            raise InvalidArgumentError(f"Workload {path} is not UTF-8 text: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise InvalidArgumentError(f"Malformed JSON workload {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise InvalidArgumentError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        try:
            for row in reader:
                processes.append(_process_from_mapping(row))
        except UnicodeDecodeError as exc:
            raise InvalidArgumentError(f"Workload {path} is not UTF-8 text: {exc}") from exc
    return processes


def _as_int(value) -> int:
    # JSON gives ints, CSV gives digit strings; floats and booleans are refused.
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_TEXT.match(value):
        return int(value)
    raise ValueError(f"expected an integer, got {value!r}")


def _process_from_mapping(mapping: Mapping) -> Process:
    try:
        pid_val = mapping["pid"] if "pid" in mapping else mapping["id"]
        return Process(
            pid=_as_int(pid_val),
            arrival_time=_as_int(mapping["arrival_time"]),
            burst_time=_as_int(mapping["burst_time"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Invalid process entry: {mapping!r}") from exc
