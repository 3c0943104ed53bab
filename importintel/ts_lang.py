"""Tree-sitter language loader helpers."""

from __future__ import annotations


def load_javascript_language():
    """Return a Tree-sitter Language object for JavaScript."""
    from tree_sitter import Language

    try:
        import tree_sitter_javascript as tsjavascript
    except ImportError as exc:  # pragma: no cover - import guard
        raise RuntimeError("tree_sitter_javascript is not installed") from exc

    # tree_sitter_javascript exposes `language()`, returning a PyCapsule.
    lang = tsjavascript.language()
    if isinstance(lang, Language):
        return lang
    return Language(lang)
