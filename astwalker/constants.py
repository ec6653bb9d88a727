"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

ANONYMOUS_NAME = "<anonymous>"

EDITION_ES5 = "es5"
EDITION_ES2015 = "es2015"

SUPPORTED_EDITIONS: tuple[str, ...] = (EDITION_ES5, EDITION_ES2015)

DEFAULT_LANGUAGE = "javascript"

SUPPORTED_LANGUAGES: tuple[str, ...] = ("javascript",)

UNSUPPORTED_NODE_TYPE = "Unsupported"

DEPENDENCY_COMMONJS = "CommonJS"
