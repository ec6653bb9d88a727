"""Syntax registry: node-type tag → SyntaxDescriptor, built per traversal."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Mapping
from types import MappingProxyType

from ..syntax_types import SyntaxDescriptor, WalkerSettings
from .. import constants

logger = logging.getLogger(__name__)

# Families registered per edition, in registration order
_EDITION_FAMILIES: dict[str, tuple[str, ...]] = {
    constants.EDITION_ES5: ("statements", "declarations", "expressions"),
    constants.EDITION_ES2015: ("statements", "declarations", "expressions", "es2015"),
}


def get_syntaxes(settings: WalkerSettings) -> Mapping[str, SyntaxDescriptor]:
    """Build the read-only registry for *settings*.

    A fresh mapping is returned on every call; nothing is cached between
    traversals.
    """
    families = _EDITION_FAMILIES[settings.edition]
    syntaxes: dict[str, SyntaxDescriptor] = {}
    for family in families:
        mod = importlib.import_module(f".{family}", package=__package__)
        syntaxes.update(mod.get(settings))
    logger.debug(
        "Built syntax registry for %s: %d node types", settings.edition, len(syntaxes)
    )
    return MappingProxyType(syntaxes)


__all__ = ["get_syntaxes"]
