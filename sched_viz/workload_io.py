from __future__ import annotations

import csv
import json
from dataclasses import asdict
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import InputError
from .models import BankersProcess, Process, SystemSnapshot


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a scheduling workload from a JSON or CSV file into a list of Process objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        raw = _read_json(path)
        if not isinstance(raw, list):
            raise InputError("JSON workload must be a list of process objects")
        return [_process_from_mapping(entry) for entry in raw]
    if suffix == ".csv":
        return [_process_from_mapping(row) for row in _read_csv(path)]

    raise InputError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def load_snapshot(path: str | Path, total_resources: Optional[int] = None) -> SystemSnapshot:
    """
    Load a Banker's snapshot.

    JSON files hold ``{"total_resources": N, "processes": [...]}`` (a bare
    list is accepted too). CSV files only carry the process rows, so the
    total has to come from ``total_resources``; when given, it also
    overrides the value stored in a JSON file.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        raw = _read_json(path)
        if isinstance(raw, dict):
            entries = raw.get("processes", [])
            if total_resources is None:
                total_resources = raw.get("total_resources")
        elif isinstance(raw, list):
            entries = raw
        else:
            raise InputError("JSON snapshot must be an object with a 'processes' list")
    elif suffix == ".csv":
        entries = _read_csv(path)
    else:
        raise InputError(f"Unsupported snapshot format: {suffix} (use .json or .csv)")

    if total_resources is None:
        raise InputError("Total resources not given (set 'total_resources' or pass --total)")

    try:
        total = _whole_number(total_resources)
    except (TypeError, ValueError) as exc:
        raise InputError(f"Invalid total resources: {total_resources!r}") from exc

    if not isinstance(entries, list):
        raise InputError("'processes' must be a list of process objects")

    return SystemSnapshot(
        total_resources=total,
        processes=[_bankers_from_mapping(entry) for entry in entries],
    )


def save_workload(processes: Iterable[Process], path: str | Path) -> Path:
    path = Path(path)
    rows = [{k: v for k, v in asdict(p).items() if v is not None} for p in processes]
    path.write_text(json.dumps(rows, indent=2) + "\n", encoding="utf-8")
    return path


def save_snapshot(snapshot: SystemSnapshot, path: str | Path) -> Path:
    path = Path(path)
    path.write_text(json.dumps(asdict(snapshot), indent=2) + "\n", encoding="utf-8")
    return path


def _whole_number(value) -> int:
    """
    Accept ints and integer strings (CSV cells); reject floats and booleans
    instead of truncating them.
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"expected a whole number, got {value!r}")
    return int(value)


def _read_json(path: Path):
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise InputError(f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc


def _read_csv(path: Path) -> List[dict]:
    with path.open("r", encoding="utf-8", newline="") as f:
        return list(csv.DictReader(f))


def _process_from_mapping(mapping) -> Process:
    try:
        pid = str(mapping["pid"]).strip()
        arrival_time = _whole_number(mapping["arrival_time"])
        burst_time = _whole_number(mapping["burst_time"])
    except (KeyError, TypeError, ValueError) as exc:
        raise InputError(f"Invalid process entry: {mapping!r}") from exc

    name = mapping.get("name")
    return Process(
        pid=pid,
        arrival_time=arrival_time,
        burst_time=burst_time,
        name=str(name).strip() if name not in (None, "") else None,
    )


def _bankers_from_mapping(mapping) -> BankersProcess:
    try:
        return BankersProcess(
            pid=str(mapping["pid"]).strip(),
            max_need=_whole_number(mapping["max_need"]),
            allocation=_whole_number(mapping["allocation"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InputError(f"Invalid Banker's process entry: {mapping!r}") from exc
