"""JSON serialization helpers for analyzer results."""

from __future__ import annotations

import json
from pathlib import Path

from .models import AnalyzerResult


def save_result(result: AnalyzerResult, path: str | Path) -> None:
    Path(path).write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")


def load_result(path: str | Path) -> AnalyzerResult:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return AnalyzerResult.from_dict(data)
