"""Result persistence for Oilfire.

The design pipeline never touches the filesystem itself; callers pass a
sink to :func:`oilfire.core.design.design_engine` when results should be
kept.  Records are named from the request so the same inputs always land
in the same file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from oilfire.core.design import DesignRequest, DesignResult

logger = logging.getLogger(__name__)


class ResultSink(Protocol):
    """Anything that can store a finished design."""

    def write(self, request: DesignRequest, result: DesignResult) -> None: ...


def _fmt(value: float) -> str:
    # 200.0 -> "200", 2.5 -> "2.5"
    return f"{value:g}"


def record_stem(request: DesignRequest) -> str:
    """Deterministic file stem for a request.

    ``<fuel>_<thrust>_<pc>_<mr>_<lstar>_<dcdt>_results``
    """
    parts = [
        request.fuel.strip().lower(),
        _fmt(request.thrust),
        _fmt(request.chamber_pressure),
        _fmt(request.mixture_ratio),
        _fmt(request.l_star),
        _fmt(request.contraction_ratio),
    ]
    return "_".join(parts) + "_results"


def format_record(result: DesignResult) -> str:
    """Render a result as ``key: value`` lines."""
    return "".join(f"{key}: {value}\n" for key, value in result.as_dict().items())


class TextRecordSink:
    """Write each result as a ``key: value`` text file under *directory*."""

    def __init__(self, directory: str | Path = "results"):
        self.directory = Path(directory)

    def path_for(self, request: DesignRequest) -> Path:
        return self.directory / f"{record_stem(request)}.txt"

    def write(self, request: DesignRequest, result: DesignResult) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(request)
        with open(path, "w") as f:
            f.write(format_record(result))
        logger.info("Saved design record to %s", path)


class JsonRecordSink:
    """Write request and unit-tagged result as JSON under *directory*."""

    def __init__(self, directory: str | Path = "results"):
        self.directory = Path(directory)

    def path_for(self, request: DesignRequest) -> Path:
        return self.directory / f"{record_stem(request)}.json"

    def write(self, request: DesignRequest, result: DesignResult) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(request)
        data = {
            "created": datetime.now(timezone.utc).isoformat(),
            "request": asdict(request),
            "result": {
                name: {"value": value, "unit": unit} for name, value, unit in result.items()
            },
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
        logger.info("Saved design record to %s", path)


class MemorySink:
    """Collect results in memory, in write order."""

    def __init__(self) -> None:
        self.records: list[tuple[DesignRequest, DesignResult]] = []

    def write(self, request: DesignRequest, result: DesignResult) -> None:
        self.records.append((request, result))


def load_json_record(path: str | Path) -> tuple[dict, dict[str, float]]:
    """Read a JSON record back as ``(request_fields, {name: value})``."""
    with open(path) as f:
        data = json.load(f)
    values = {name: entry["value"] for name, entry in data["result"].items()}
    return data["request"], values
