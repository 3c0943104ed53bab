"""Import/export extraction over parser-produced JavaScript ASTs."""

from .analyzer import AnalyzerContext, FindImportsAnalyzer, FindImportsConfig
from .dialects import SUPPORTED_DIALECTS, resolve_adapter
from .errors import MalformedDeclaration, ResolutionFailure, UnsupportedDialect
from .models import AnalyzerResult, Classification, FindImportsEntry, TaggedAst
from .normalize import normalize_source_paths
from .storage import load_result, save_result
from .traverse import traverse

__all__ = [
    "AnalyzerContext",
    "AnalyzerResult",
    "Classification",
    "FindImportsAnalyzer",
    "FindImportsConfig",
    "FindImportsEntry",
    "MalformedDeclaration",
    "ResolutionFailure",
    "SUPPORTED_DIALECTS",
    "TaggedAst",
    "UnsupportedDialect",
    "load_result",
    "normalize_source_paths",
    "resolve_adapter",
    "save_result",
    "traverse",
]
