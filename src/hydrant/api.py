# topmark:header:start
#
#   project      : Hydrant
#   file         : api.py
#   file_relpath : src/hydrant/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for Hydrant.

```python
from hydrant import serialize

serialize({"a": 1, "b": [1, 2, 3]})  # '{a:1,b:[1,2,3]}'
```

Both entry points run the canonicalize-then-emit sequence to completion with
fresh per-call tables and a fresh diagnostic counter. They never raise for an
unsupported value shape; such values are reported and omitted from the output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from hydrant.config.logging import get_logger
from hydrant.config.settings import ENV_SETTINGS
from hydrant.core.canonicalizer import canonicalize
from hydrant.core.emitter import emit
from hydrant.diagnostic.model import DiagnosticLog

if TYPE_CHECKING:
    from hydrant.config.logging import HydrantLogger
    from hydrant.config.settings import Settings
    from hydrant.diagnostic.model import DiagnosticLevel, FrozenDiagnosticLog

logger: HydrantLogger = get_logger(__name__)


@dataclass(frozen=True)
class SerializeResult:
    """Expression text plus the diagnostics reported while producing it.

    Attributes:
        text (str): The JavaScript expression.
        diagnostics (FrozenDiagnosticLog): Recorded reports (at most the cap).
    """

    text: str
    diagnostics: FrozenDiagnosticLog

    @property
    def suppressed(self) -> int:
        """Number of reports dropped because the cap was reached."""
        return self.diagnostics.suppressed


def serialize_report(
    value: Any,
    level: str | DiagnosticLevel | None = None,
    *,
    limit: int | None = None,
    settings: Settings | None = None,
) -> SerializeResult:
    """Serialize ``value`` and return the text with its diagnostics.

    Args:
        value (Any): The value graph to serialize.
        level (str | DiagnosticLevel | None): Severity for unsupported-value reports
            (``"warn"``, ``"info"``, ...). Defaults to the configured level.
        limit (int | None): Maximum number of reports for this call. Defaults to
            the configured cap.
        settings (Settings | None): Base settings (defaults to the environment
            settings read at import time).

    Returns:
        SerializeResult: The expression and the frozen diagnostic log.

    Raises:
        ValueError: If ``level`` is not a known severity name.
    """
    effective: Settings = (settings or ENV_SETTINGS).merged(log_level=level, log_limit=limit)
    diagnostics = DiagnosticLog(level=effective.log_level, limit=effective.log_limit)

    canonical = canonicalize(value, diagnostics=diagnostics)
    text: str = emit(value, canonical)

    logger.trace("Serialized %s to %d character(s)", type(value).__name__, len(text))
    return SerializeResult(text=text, diagnostics=diagnostics.freeze())


def serialize(
    value: Any,
    level: str | DiagnosticLevel | None = None,
    *,
    limit: int | None = None,
    settings: Settings | None = None,
) -> str:
    """Serialize ``value`` to a self-contained JavaScript expression.

    Evaluating the returned text rebuilds a value deeply equal to ``value``,
    including shared and cyclic sub-structures. The text is safe to inline in a
    ``<script>`` element.

    See [`serialize_report`][hydrant.api.serialize_report] for the arguments.
    """
    return serialize_report(value, level, limit=limit, settings=settings).text
