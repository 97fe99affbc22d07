"""Authentication helpers for Databricks.

This module builds the Databricks WorkspaceClient used by the jobs adapter.
Profiles come from the SDK's unified configuration (~/.databrickscfg or
DATABRICKS_* environment variables); BUILDOPS_PROFILE is honored when no
profile is passed explicitly.
"""

from __future__ import annotations

import os
import re

from databricks.sdk import WorkspaceClient
from databricks.sdk.core import Config

PROFILE_ENV = "BUILDOPS_PROFILE"


class AuthError(RuntimeError):
    """Raised when Databricks authentication fails."""


def _format_auth_error(message: str, profile: str | None) -> str:
    """Turn an SDK configuration error into an actionable message."""
    if re.search(r"databricks auth login", message):
        cmd = "databricks auth login"
        if profile:
            cmd = f"{cmd} --profile {profile}"
        return (
            "Databricks authentication failed: the stored token is no longer valid.\n"
            f"Log in again with:\n  $ {cmd}"
        )
    return f"Databricks authentication failed: {message}"


def _sanitize_host(host: str | None) -> str | None:
    """Drop query strings (e.g. '?o=123') and trailing slashes from a host URL."""
    if not host:
        return host
    return host.split("?", 1)[0].rstrip("/")


def resolve_profile(profile: str | None) -> str | None:
    """Return the explicit profile, else BUILDOPS_PROFILE, else None."""
    return profile or os.getenv(PROFILE_ENV) or None


def get_client(profile: str | None = None) -> WorkspaceClient:
    """
    Create a configured Databricks WorkspaceClient.

    Raises:
        AuthError: If the SDK cannot build a configuration for the profile.
    """
    profile = resolve_profile(profile)
    try:
        cfg = Config(profile=profile) if profile else Config()
    except ValueError as exc:
        raise AuthError(_format_auth_error(str(exc), profile)) from exc
    cfg.host = _sanitize_host(cfg.host)
    return WorkspaceClient(config=cfg)
