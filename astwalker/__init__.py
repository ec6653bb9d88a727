"""Descriptor-driven ESTree walker."""

from .walker import walk, WalkerContractError  # noqa: F401
from .safe_name import safe_name  # noqa: F401
from .callbacks import WalkerCallbacks, TraceRecorder  # noqa: F401
from .syntax import get_syntaxes  # noqa: F401
from .syntax_types import SyntaxDescriptor, Trait, WalkerSettings  # noqa: F401
from .api import (  # noqa: F401
    parse_source,
    walk_source,
    trace_source,
    dump_trace,
    scope_names,
)
