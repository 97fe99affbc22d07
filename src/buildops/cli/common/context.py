"""Application context management for the CLI."""

from dataclasses import dataclass

from databricks.sdk import WorkspaceClient

from buildops.cli.common.exits import die
from buildops.core.adapters.databricksjobs import DatabricksJobsAdapter
from buildops.core.auth import AuthError, get_client


@dataclass
class BuildsAppContext:
    """Databricks client and jobs adapter shared by the builds commands."""

    profile: str | None
    client: WorkspaceClient
    adapter: DatabricksJobsAdapter


def build_builds_context(profile: str | None) -> BuildsAppContext:
    """Authenticate against Databricks and wire up the jobs adapter.

    Args:
        profile: Optional Databricks profile name to use for authentication.
    """
    try:
        client = get_client(profile)
    except AuthError as exc:
        die(str(exc), code=1)
    adapter = DatabricksJobsAdapter(client)
    return BuildsAppContext(profile=profile, client=client, adapter=adapter)
