"""Terminal UI utilities for buildops."""

from __future__ import annotations

from typing import Sequence, TypeVar

import questionary

from buildops.cli.common.tui_style import QUESTIONARY_STYLE_SELECT

_MAX_JOB_NAME_WIDTH = 96

JobT = TypeVar("JobT")


def _truncate(text: str, max_len: int) -> str:
    """Return text capped at max_len characters using an ASCII ellipsis."""
    if max_len <= 3 or len(text) <= max_len:
        return text[:max_len]
    return f"{text[: max_len - 3]}..."


def _job_choice_title(name: str, job_id: object, *, name_width: int) -> str:
    """Format one job choice as `<name>  (id: <job_id>)` with aligned id column."""
    short_name = _truncate(name, _MAX_JOB_NAME_WIDTH)
    return f"{short_name.ljust(name_width)}  (id: {job_id})"


def select_job(jobs: Sequence[JobT]) -> JobT | None:
    """Prompt for one job out of several candidates.

    Expects objects with .full_name and .job_id (like DatabricksJob).

    Returns:
        The chosen job, or None if the prompt was cancelled.
    """
    shown_names = [_truncate(job.full_name, _MAX_JOB_NAME_WIDTH) for job in jobs]
    name_width = max((len(name) for name in shown_names), default=0)

    choices = [
        questionary.Choice(
            title=_job_choice_title(job.full_name, job.job_id, name_width=name_width),
            value=job,
        )
        for job in jobs
    ]

    return questionary.select(
        "Several jobs match, pick one:",
        choices=choices,
        style=QUESTIONARY_STYLE_SELECT,
    ).ask()
