"""Commands for resolving builds of Databricks jobs."""

import typer
from databricks.sdk.errors import DatabricksError

from buildops.cli.common.context import build_builds_context
from buildops.cli.common.env_builder import build_env
from buildops.cli.common.exits import die, exit_from_exc, warn_exit
from buildops.cli.common.logs import configure_logging
from buildops.cli.common.options import (
    EnvOpt,
    InheritEnvOpt,
    JobOpt,
    NoInputOpt,
    ProfileOpt,
    VerboseOpt,
)
from buildops.cli.common.output import out
from buildops.cli.tui import select_job as tui_select_job
from buildops.core.permalinks import STANDARD_PERMALINKS
from buildops.core.registry import default_registry
from buildops.core.selectors import InvalidIdentifierError

app = typer.Typer(
    help="Resolve builds (job runs) by number, permalink or display name",
    no_args_is_help=True,
)


@app.callback()
def _init(verbose: bool = VerboseOpt):
    """Configure logging for all builds commands."""
    configure_logging(verbose)


@app.command()
def resolve(
    identifier: str = typer.Argument(
        ..., help="Build number, permalink name or display name ($VARS allowed)"
    ),
    job: str = JobOpt,
    env: list[str] = EnvOpt,
    inherit_env: bool = InheritEnvOpt,
    no_input: bool = NoInputOpt,
    profile: str | None = ProfileOpt,
):
    """
    Resolve IDENTIFIER to one build of the job matching --job.
    """
    try:
        selector = default_registry().create("specificRun", identifier)
        variables = build_env(pairs=env, inherit=inherit_env)
    except ValueError as e:
        die(str(e), code=1)

    appctx = build_builds_context(profile)

    try:
        with out.status("Loading jobs..."):
            jobs = appctx.adapter.find_jobs_by_regex(job)
    except ValueError as e:
        die(str(e), code=1)
    except DatabricksError as exc:
        exit_from_exc(exc, message=f"Databricks API error: {exc}")

    if not jobs:
        warn_exit("No jobs found", code=0)

    if len(jobs) == 1:
        target = jobs[0]
    elif no_input:
        die(f"{len(jobs)} jobs match '{job}', narrow down --job", code=1)
    else:
        target = tui_select_job(jobs)
        if target is None:
            warn_exit("No job selected", code=0)

    try:
        with out.status(f"Resolving '{identifier}'..."):
            build = selector.select(target, variables)
    except InvalidIdentifierError as e:
        die(str(e), code=1)
    except DatabricksError as exc:
        exit_from_exc(exc, message=f"Databricks API error: {exc}")

    if build is None:
        warn_exit(f"No build matches '{identifier}' in {target.full_name}", code=0)

    out.builds_table([build], title="Resolved build")


@app.command()
def permalinks():
    """
    List the permalink names usable as identifiers.
    """
    out.permalinks_table(STANDARD_PERMALINKS)


@app.command()
def selectors():
    """
    List the registered build selector kinds.
    """
    out.selectors_table(default_registry().entries())
