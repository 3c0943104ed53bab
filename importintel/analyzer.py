"""Analyzer contract and the find-imports analyzer."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields, replace
from typing import Any, ClassVar, Mapping

from ._logging import LogSink, get_logger
from .dialects import DialectAdapter, resolve_adapter
from .models import AnalyzerResult, TaggedAst
from .normalize import filter_internal_sources, normalize_source_paths
from .traverse import traverse


@dataclass(frozen=True)
class FindImportsConfig:
    # None keeps relative sources file-relative.
    target_project_path: str | os.PathLike | None = None
    # Relative sources like '../x.js' are filtered out unless kept here.
    keep_internal_sources: bool = False

    ALIASES: ClassVar[dict[str, str]] = {
        "targetProjectPath": "target_project_path",
        "keepInternalSources": "keep_internal_sources",
    }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FindImportsConfig:
        return cls().merged(data)

    def merged(self, overrides: FindImportsConfig | Mapping[str, Any] | None) -> FindImportsConfig:
        if overrides is None:
            return self
        if isinstance(overrides, FindImportsConfig):
            overrides = {item.name: getattr(overrides, item.name) for item in fields(overrides)}
        values = {self.ALIASES.get(key, key): value for key, value in overrides.items()}
        return replace(self, **values)


@dataclass(frozen=True)
class AnalyzerContext:
    relative_path: str
    analyzer_cfg: FindImportsConfig | Mapping[str, Any] | None = None


class Analyzer(ABC):
    """Pluggable per-file analyzer.

    Subclasses declare ``analyzer_name`` and the AST dialect they expect in
    ``required_ast``; orchestration code instantiates them and awaits
    :meth:`analyze_file` once per parsed file.
    """

    analyzer_name: ClassVar[str]
    required_ast: ClassVar[str]

    def __init__(self, custom_config: Any = None, logger: LogSink | None = None) -> None:
        self._custom_config = custom_config
        self.logger = logger or get_logger()

    @property
    @abstractmethod
    def config(self) -> Any: ...

    def resolve_ast(self, ast: Any) -> tuple[DialectAdapter, Any]:
        """Pick the adapter for a tagged tree, or ``required_ast`` for a bare one."""
        if isinstance(ast, TaggedAst):
            return resolve_adapter(ast.dialect), ast.tree
        return resolve_adapter(self.required_ast), ast

    @abstractmethod
    async def analyze_file(self, ast: Any, context: AnalyzerContext) -> AnalyzerResult: ...


class FindImportsAnalyzer(Analyzer):
    analyzer_name = "find-imports"
    required_ast = "oxc"

    def __init__(
        self,
        custom_config: FindImportsConfig | Mapping[str, Any] | None = None,
        logger: LogSink | None = None,
    ) -> None:
        super().__init__(custom_config, logger=logger)

    @property
    def config(self) -> FindImportsConfig:
        return FindImportsConfig().merged(self._custom_config)

    def _context_config(self, context: AnalyzerContext) -> FindImportsConfig:
        cfg = context.analyzer_cfg
        if cfg is None:
            return self.config
        if isinstance(cfg, FindImportsConfig):
            return cfg
        return FindImportsConfig.from_mapping(cfg)

    async def analyze_file(self, ast: Any, context: AnalyzerContext) -> AnalyzerResult:
        cfg = self._context_config(context)
        adapter, tree = self.resolve_ast(ast)

        entries = traverse(tree, adapter, logger=self.logger, relative_path=context.relative_path)

        entries = await normalize_source_paths(
            entries,
            context.relative_path,
            cfg.target_project_path,
            logger=self.logger,
        )
        if not cfg.keep_internal_sources:
            entries = filter_internal_sources(entries)

        return AnalyzerResult(result=tuple(entries))
