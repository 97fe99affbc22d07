"""Build selector abstractions and implementations.

This module defines the selector system used to pick one concrete build of
a job. A selector encapsulates a selection criterion (for example "the build
named by this identifier") and returns either a build or None when nothing
currently matches. Absence is a normal outcome, never an error.

Selectors are pure, side-effect-free objects: they only read the job, its
builds and its permalinks. Failures raised by those collaborators are
propagated unchanged to the caller.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Mapping

from buildops.core.expand import VARIABLE_MARKER, expand_vars

if TYPE_CHECKING:
    from buildops.core.builds import Build, Job

logger = logging.getLogger(__name__)

_BUILD_NUMBER = re.compile(r"[0-9]+")


class InvalidIdentifierError(ValueError):
    """Raised when a build identifier is empty or whitespace-only."""


class BuildSelector(ABC):
    """
    Abstract base class for all build selectors.

    A BuildSelector encapsulates a single piece of selection logic that
    picks at most one build of a given job.
    """

    @abstractmethod
    def select(self, job: Job, env: Mapping[str, str] | None = None) -> Build | None:
        """
        Select a build of the given job.

        Args:
            job: Job whose builds are searched.
            env: Variables available to the selection criterion.

        Returns:
            The selected build, or None if no build matches.
        """
        ...


class SpecificBuildSelector(BuildSelector):
    """
    Selector that picks the build named by an identifier.

    The identifier is expanded against the environment and then read as
    either a build number, a permalink name or a build display name.
    """

    def __init__(self, identifier: str | None):
        """
        Create a selector for a specific build.

        Args:
            identifier: Build number, permalink name or display name. May
                        contain `$NAME` / `${NAME}` placeholders.

        Raises:
            InvalidIdentifierError: If the identifier is empty or blank.
        """
        self.identifier = (identifier or "").strip()
        if not self.identifier:
            raise InvalidIdentifierError("Build identifier must not be empty.")

    def select(self, job: Job, env: Mapping[str, str] | None = None) -> Build | None:
        """
        Resolve the identifier against `job`.

        Numbers are looked up directly. Any other text is tried as a
        permalink name first; a matching permalink is authoritative even if
        it points at nothing. Otherwise the newest build whose display name
        equals the text is returned.
        """
        text = expand_vars(self.identifier, env)
        if text.startswith(VARIABLE_MARKER):
            logger.debug("unresolved variable %s", text)
            return None
        if not text.strip():
            raise InvalidIdentifierError(
                f"Build identifier {self.identifier!r} expanded to an empty value."
            )

        if _BUILD_NUMBER.fullmatch(text):
            build = job.build_by_number(int(text))
        else:
            build = self._by_permalink_or_display_name(job, text)

        if build is None:
            logger.debug("no such build %s in %s", text, job.full_name)
        return build

    @staticmethod
    def _by_permalink_or_display_name(job: Job, text: str) -> Build | None:
        permalink = job.permalinks().get(text)
        if permalink is not None:
            return permalink.resolve(job)

        # newest first, so the first match wins on duplicate names
        for build in job.all_builds():
            if build.display_name == text:
                return build
        return None

    def __repr__(self) -> str:
        return f"SpecificBuildSelector({self.identifier!r})"


def resolve_build(
    job: Job,
    identifier: str | None,
    env: Mapping[str, str] | None = None,
) -> Build | None:
    """
    Resolve a build identifier against a job.

    This is a thin convenience wrapper around SpecificBuildSelector.

    Args:
        job: Job whose builds are searched.
        identifier: Build number, permalink name or display name, possibly
                    containing variable placeholders.
        env: Mapping used to expand placeholders.

    Returns:
        The matching build, or None if no build matches.

    Raises:
        InvalidIdentifierError: If the identifier is empty, as given or
                                after expansion.
    """
    return SpecificBuildSelector(identifier).select(job, env)
