"""Core build domain models and the collaborator interfaces of a job.

This module defines the build data structure (Build, RunStatus) and the
protocols a job and its permalinks must satisfy so that build selectors can
look builds up. It is intentionally free of Databricks SDK types and CLI
concerns: any storage backend (Databricks, an in-memory fixture, ...) can
provide jobs by implementing these protocols.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Protocol


class RunStatus(str, Enum):
    """
    Enumeration of possible states of a build.

    Values:
        PENDING: The build has been created but has not started yet.
        RUNNING: The build is currently executing.
        SUCCESS: The build completed successfully.
        FAILED: The build completed with an error.
        CANCELED: The build was canceled before completion.
        UNKNOWN: The build state could not be determined.
    """

    PENDING = "PENDING"
    RUNNING = "RUNNING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    CANCELED = "CANCELED"
    UNKNOWN = "UNKNOWN"


TERMINAL_STATUSES = frozenset({RunStatus.SUCCESS, RunStatus.FAILED, RunStatus.CANCELED})


@dataclass(frozen=True)
class Build:
    """
    Represents a single execution (build) of a job.

    Attributes:
        number: Integer identifying the build within its job.
        display_name: Human-assigned label. Not unique within a job; defaults
                      to `#<number>` when the build carries no name.
        status: Current state of the build.
        job_name: Full name of the job this build belongs to.
    """

    number: int
    display_name: str = ""
    status: RunStatus = RunStatus.UNKNOWN
    job_name: str = ""

    def __post_init__(self) -> None:
        if not self.display_name:
            object.__setattr__(self, "display_name", f"#{self.number}")


class Permalink(Protocol):
    """A named rule that points at zero or one build of a job."""

    name: str

    def resolve(self, job: Job) -> Build | None:
        """Return the build this permalink currently points at, if any."""
        ...


class Job(Protocol):
    """Read-only view of a job used by build selectors."""

    @property
    def full_name(self) -> str:
        """Full name identifying the job."""
        ...

    def build_by_number(self, number: int) -> Build | None:
        """Return the build with this exact number, or None."""
        ...

    def all_builds(self) -> Iterable[Build]:
        """Return the builds of the job, newest first."""
        ...

    def permalinks(self) -> Mapping[str, Permalink]:
        """Return the permalinks registered on the job, keyed by name."""
        ...
