"""Error taxonomy for import analysis."""

from __future__ import annotations


class ImportIntelError(Exception):
    """Base class for every error raised by importintel."""


class UnsupportedDialect(ImportIntelError, ValueError):
    def __init__(self, dialect: object, reason: str | None = None) -> None:
        message = f"Unsupported AST dialect: {dialect!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.dialect = dialect
        self.reason = reason


class MalformedDeclaration(ImportIntelError):
    def __init__(self, node_type: str | None, reason: str) -> None:
        super().__init__(f"Malformed {node_type or 'node'}: {reason}")
        self.node_type = node_type
        self.reason = reason


class ResolutionFailure(ImportIntelError):
    def __init__(self, specifier: str, importer: str, best_effort: str) -> None:
        super().__init__(
            f"Could not resolve {specifier!r} imported from {importer!r}; "
            f"keeping {best_effort!r}"
        )
        self.specifier = specifier
        self.importer = importer
        self.best_effort = best_effort
