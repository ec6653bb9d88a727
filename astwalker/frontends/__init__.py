"""Tree-sitter → ESTree frontends for supported languages."""

from __future__ import annotations

from ._base import BaseFrontend
from .javascript import JavaScriptFrontend
from .. import constants

_FRONTEND_CLASSES: dict[str, type[BaseFrontend]] = {
    "javascript": JavaScriptFrontend,
}


def get_frontend(language: str) -> BaseFrontend:
    """Instantiate the ESTree frontend for *language*.

    Raises ``ValueError`` if *language* has no registered frontend.
    """
    cls = _FRONTEND_CLASSES.get(language)
    if cls is None:
        raise ValueError(
            f"Unsupported language: {language} "
            f"(supported: {', '.join(constants.SUPPORTED_LANGUAGES)})"
        )
    return cls()


__all__ = ["BaseFrontend", "JavaScriptFrontend", "get_frontend"]
