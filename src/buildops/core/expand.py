"""Variable expansion for build identifiers.

Placeholders use shell-like syntax: `${NAME}` or `$NAME`. Only names present
in the supplied mapping are substituted; anything else is left untouched so
callers can detect unresolved variables.
"""

from __future__ import annotations

import re
from typing import Mapping

VARIABLE_MARKER = "$"

_PLACEHOLDER = re.compile(r"\$(?:\{([A-Za-z0-9_.]+)\}|([A-Za-z0-9_]+))")


def expand_vars(text: str, env: Mapping[str, str] | None) -> str:
    """Substitute `${NAME}` / `$NAME` placeholders defined in `env`."""
    if not env or VARIABLE_MARKER not in text:
        return text

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1) or match.group(2)
        value = env.get(key)
        return match.group(0) if value is None else str(value)

    return _PLACEHOLDER.sub(_replace, text)
