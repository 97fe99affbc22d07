"""Construction of the variable mapping used to expand build identifiers.

Translates repeated `--env KEY=VALUE` arguments (optionally layered on top of
the process environment) into a single mapping, validating the format.
"""

from __future__ import annotations

import os
from typing import Iterable, Mapping


def build_env(
    *,
    pairs: Iterable[str],
    inherit: bool = False,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """
    Build the expansion environment from `KEY=VALUE` strings.

    Args:
        pairs: Iterable of `KEY=VALUE` strings. Later entries win.
        inherit: If True, start from `base` (defaults to os.environ).
        base: Mapping used when `inherit` is set.

    Returns:
        The merged mapping.

    Raises:
        ValueError: If an entry has no `=` or an empty key.
    """
    env: dict[str, str] = {}
    if inherit:
        env.update(os.environ if base is None else base)

    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Invalid --env entry: '{pair}' (expected KEY=VALUE)")
        env[key] = value

    return env
