# topmark:header:start
#
#   project      : Hydrant
#   file         : constants.py
#   file_relpath : src/hydrant/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hydrant Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

HYDRANT_VERSION: str = get_version("hydrant")

# Environment variables read once at import time
ENV_LOG_LEVEL: Final[str] = "HYDRANT_LOG_LEVEL"
ENV_LOG_LIMIT: Final[str] = "HYDRANT_LOG_LIMIT"
ENV_DEBUG_LEVEL: Final[str] = "HYDRANT_DEBUG_LEVEL"

DEFAULT_LOG_LEVEL: Final[str] = "warn"
DEFAULT_LOG_LIMIT: Final[int] = 99

DEFAULT_TOML_CONFIG_NAME: Final[str] = "hydrant.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# Logger receiving the diagnostics reported while serializing
DIAGNOSTICS_LOGGER_NAME: Final[str] = "hydrant.diagnostics"

# Alphabet for generated binding names (bijective base-54)
NAME_CHARS: Final[str] = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_$"

RESERVED_WORDS: Final[frozenset[str]] = frozenset(
    {
        "do",
        "if",
        "in",
        "for",
        "int",
        "let",
        "new",
        "try",
        "var",
        "byte",
        "case",
        "char",
        "else",
        "enum",
        "goto",
        "long",
        "this",
        "void",
        "with",
        "await",
        "break",
        "catch",
        "class",
        "const",
        "final",
        "float",
        "short",
        "super",
        "throw",
        "while",
        "yield",
        "delete",
        "double",
        "export",
        "import",
        "native",
        "return",
        "switch",
        "throws",
        "typeof",
        "boolean",
        "default",
        "extends",
        "finally",
        "package",
        "private",
        "abstract",
        "continue",
        "debugger",
        "function",
        "volatile",
        "interface",
        "protected",
        "transient",
        "implements",
        "instanceof",
        "synchronized",
    }
)
