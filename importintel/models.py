"""Lightweight data models for extracted import entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


DEFAULT = "[default]"
NAMESPACE = "[*]"
FILE = "[file]"
VARIABLE = "[variable]"

SENTINEL_TAGS = frozenset({DEFAULT, NAMESPACE, FILE, VARIABLE})


class Classification(str, Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"


@dataclass(frozen=True)
class FindImportsEntry:
    import_specifiers: tuple[str, ...]
    source: str
    assertion_type: str | None = None
    classification: Classification | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "importSpecifiers": list(self.import_specifiers),
            "source": self.source,
        }
        if self.assertion_type:
            data["assertionType"] = self.assertion_type
        if self.classification is not None:
            data["classification"] = self.classification.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FindImportsEntry:
        classification = data.get("classification")
        return cls(
            import_specifiers=tuple(data["importSpecifiers"]),
            source=data["source"],
            assertion_type=data.get("assertionType"),
            classification=Classification(classification) if classification else None,
        )


@dataclass(frozen=True)
class AnalyzerResult:
    result: tuple[FindImportsEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"result": [entry.to_dict() for entry in self.result]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalyzerResult:
        return cls(result=tuple(FindImportsEntry.from_dict(item) for item in data["result"]))


@dataclass(frozen=True)
class TaggedAst:
    dialect: str
    tree: Any
