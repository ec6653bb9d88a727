"""Composable API functions for parsing and walking source code.

Each function corresponds to a CLI workflow but is callable programmatically
without argparse.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .callbacks import TraceRecorder, WalkerCallbacks
from .parser import Parser, ParserFactory, TreeSitterParserFactory
from .trace_types import EventKind, VisitEvent
from .walker import walk
from . import constants

logger = logging.getLogger(__name__)


def parse_source(
    source: str,
    language: str = constants.DEFAULT_LANGUAGE,
    parser_factory: Optional[ParserFactory] = None,
) -> dict[str, Any]:
    """Parse source code into an ESTree ``Program`` dict.

    Args:
        source: The source code text.
        language: Source language name.
        parser_factory: Factory supplying the tree-sitter parser; defaults to
            tree-sitter-language-pack.

    Returns:
        The ESTree program.
    """
    parser = Parser(parser_factory or TreeSitterParserFactory())
    return parser.parse(source, language)


def walk_source(
    source: str,
    callbacks: WalkerCallbacks,
    settings: Any = None,
    language: str = constants.DEFAULT_LANGUAGE,
) -> None:
    """Parse *source* and walk the resulting tree with *callbacks*."""
    logger.info("Walking %s source (%d bytes)", language, len(source))
    tree = parse_source(source, language)
    walk(tree, settings if settings is not None else {}, callbacks)


def trace_source(
    source: str,
    settings: Any = None,
    language: str = constants.DEFAULT_LANGUAGE,
) -> list[VisitEvent]:
    """Walk *source* and return every observer notification, in order."""
    recorder = TraceRecorder()
    walk_source(source, recorder, settings, language)
    return recorder.events


def dump_trace(
    source: str,
    settings: Any = None,
    language: str = constants.DEFAULT_LANGUAGE,
    as_json: bool = False,
) -> str:
    """Walk *source* and return a human-readable (or JSON) trace dump."""
    events = trace_source(source, settings, language)
    if as_json:
        return json.dumps([e.model_dump(mode="json") for e in events], indent=2)
    return "\n".join(str(e) for e in events)


def scope_names(
    source: str,
    settings: Any = None,
    language: str = constants.DEFAULT_LANGUAGE,
) -> list[str]:
    """Return the names of all scopes created while walking *source*, in order."""
    return [
        e.scope_name
        for e in trace_source(source, settings, language)
        if e.kind == EventKind.CREATE_SCOPE
    ]
