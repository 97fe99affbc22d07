from __future__ import annotations

import logging
import os
import re
from itertools import islice
from typing import Iterator

from databricks.sdk import WorkspaceClient
from databricks.sdk.errors import InvalidParameterValue, NotFound

from buildops.core.builds import Build, RunStatus
from buildops.core.permalinks import StatusPermalink, default_permalinks

logger = logging.getLogger(__name__)

MAX_RUNS_ENV = "BUILDOPS_MAX_RUNS"

# Keyed by enum value; older SDK releases lack some members (e.g. DISABLED).
_RESULT_STATES = {
    "SUCCESS": RunStatus.SUCCESS,
    "SUCCESS_WITH_FAILURES": RunStatus.FAILED,
    "FAILED": RunStatus.FAILED,
    "TIMEDOUT": RunStatus.FAILED,
    "UPSTREAM_FAILED": RunStatus.FAILED,
    "MAXIMUM_CONCURRENT_RUNS_REACHED": RunStatus.FAILED,
    "CANCELED": RunStatus.CANCELED,
    "UPSTREAM_CANCELED": RunStatus.CANCELED,
    "EXCLUDED": RunStatus.CANCELED,
    "DISABLED": RunStatus.CANCELED,
}

# Used only when the run carries no result state.
_LIFE_CYCLE_STATES = {
    "QUEUED": RunStatus.PENDING,
    "PENDING": RunStatus.PENDING,
    "BLOCKED": RunStatus.PENDING,
    "WAITING_FOR_RETRY": RunStatus.PENDING,
    "RUNNING": RunStatus.RUNNING,
    "TERMINATING": RunStatus.RUNNING,
    "SKIPPED": RunStatus.CANCELED,
    "INTERNAL_ERROR": RunStatus.FAILED,
}

_MAX_RUN_ID = 2**63 - 1


def max_runs_from_env() -> int | None:
    """Return the run enumeration cap, or None for unlimited."""
    raw = os.getenv(MAX_RUNS_ENV)
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring invalid %s=%r", MAX_RUNS_ENV, raw)
        return None
    return value if value > 0 else None


def run_status(run) -> RunStatus:
    """Map the state of an SDK run onto RunStatus."""
    state = getattr(run, "state", None)
    if not state:
        return RunStatus.UNKNOWN

    result = _state_value(state.result_state)
    if result:
        return _RESULT_STATES.get(result, RunStatus.UNKNOWN)
    life_cycle = _state_value(state.life_cycle_state)
    return _LIFE_CYCLE_STATES.get(life_cycle, RunStatus.UNKNOWN)


def _state_value(state) -> str | None:
    """Return the string value of an SDK state enum (or a raw string)."""
    if state is None:
        return None
    return str(getattr(state, "value", state))


def _is_missing_run(exc: InvalidParameterValue) -> bool:
    """True when a 400 from runs/get reports that the run does not exist."""
    return bool(re.search(r"does not exist", str(exc), re.IGNORECASE))


class DatabricksJob:
    """A Databricks job seen as a job of builds (runs)."""

    def __init__(
        self,
        client: WorkspaceClient,
        job_id: int,
        name: str,
        *,
        max_runs: int | None = None,
    ):
        self.client = client
        self.job_id = job_id
        self.name = name
        self.max_runs = max_runs if max_runs and max_runs > 0 else None

    @property
    def full_name(self) -> str:
        return self.name

    def _to_build(self, run) -> Build:
        return Build(
            number=run.run_id,
            display_name=getattr(run, "run_name", None) or "",
            status=run_status(run),
            job_name=self.name,
        )

    def build_by_number(self, number: int) -> Build | None:
        """Return the run with this id if it belongs to this job."""
        # run ids are int64 on the API side
        if number > _MAX_RUN_ID:
            return None
        try:
            run = self.client.jobs.get_run(number)
        except NotFound:
            return None
        except InvalidParameterValue as exc:
            if _is_missing_run(exc):
                return None
            raise
        if run.job_id != self.job_id:
            return None
        return self._to_build(run)

    def all_builds(self) -> Iterator[Build]:
        """Yield runs newest first, honoring the enumeration cap."""
        runs = self.client.jobs.list_runs(job_id=self.job_id)
        for run in islice(runs, self.max_runs):
            yield self._to_build(run)

    def permalinks(self) -> dict[str, StatusPermalink]:
        return default_permalinks()

    def __repr__(self) -> str:
        return f"DatabricksJob(job_id={self.job_id}, name={self.name!r})"


class DatabricksJobsAdapter:
    """Adapter around Databricks SDK Jobs APIs."""

    def __init__(self, client: WorkspaceClient, *, max_runs: int | None = None):
        """Create a jobs adapter for a Databricks workspace."""
        self.client = client
        self.max_runs = max_runs if max_runs is not None else max_runs_from_env()

    def find_jobs_by_regex(self, pattern: str) -> list[DatabricksJob]:
        """
        Return jobs whose names match the regex pattern.

        Raises:
            ValueError: If the pattern is not a valid regular expression.
        """
        try:
            rx = re.compile(pattern)
        except re.error as exc:
            raise ValueError(f"Invalid regex expression: {exc}") from exc

        jobs: list[DatabricksJob] = []
        for j in self.client.jobs.list():
            if not j.settings or not j.settings.name:
                continue
            if rx.search(j.settings.name):
                jobs.append(
                    DatabricksJob(
                        self.client,
                        j.job_id,
                        j.settings.name,
                        max_runs=self.max_runs,
                    )
                )
        return jobs
