"""Standard permalinks shared by jobs that do not define their own.

A permalink is resolved dynamically: each call walks the job's builds from
newest to oldest and returns the first one whose status satisfies the
permalink's rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from buildops.core.builds import TERMINAL_STATUSES, Build, RunStatus

if TYPE_CHECKING:
    from buildops.core.builds import Job


@dataclass(frozen=True)
class StatusPermalink:
    """
    Permalink pointing at the newest build whose status satisfies a rule.

    Attributes:
        name: Symbolic name used in identifiers (e.g. `lastSuccessfulBuild`).
        label: Human-readable label shown in listings.
        accepts: Predicate applied to each build's status.
    """

    name: str
    label: str
    accepts: Callable[[RunStatus], bool]

    def resolve(self, job: Job) -> Build | None:
        """Return the newest build of `job` accepted by this permalink."""
        for build in job.all_builds():
            if self.accepts(build.status):
                return build
        return None


STANDARD_PERMALINKS: tuple[StatusPermalink, ...] = (
    StatusPermalink("lastBuild", "Last build", lambda status: True),
    StatusPermalink(
        "lastStableBuild",
        "Last stable build",
        lambda status: status == RunStatus.SUCCESS,
    ),
    StatusPermalink(
        "lastSuccessfulBuild",
        "Last successful build",
        lambda status: status == RunStatus.SUCCESS,
    ),
    StatusPermalink(
        "lastFailedBuild",
        "Last failed build",
        lambda status: status == RunStatus.FAILED,
    ),
    StatusPermalink(
        "lastUnsuccessfulBuild",
        "Last unsuccessful build",
        lambda status: status in {RunStatus.FAILED, RunStatus.CANCELED},
    ),
    StatusPermalink(
        "lastCompletedBuild",
        "Last completed build",
        lambda status: status in TERMINAL_STATUSES,
    ),
)


def default_permalinks() -> dict[str, StatusPermalink]:
    """Return a fresh name -> permalink mapping of the standard permalinks."""
    return {p.name: p for p in STANDARD_PERMALINKS}
