import logging

import pytest

from buildops.core.builds import Build, RunStatus
from buildops.core.selectors import (
    InvalidIdentifierError,
    SpecificBuildSelector,
    resolve_build,
)


class _NoneLink:
    name = "lastSuccessfulBuild"

    def resolve(self, job):
        return None


def test_resolves_by_number(sample_job):
    build = resolve_build(sample_job, "4", {})

    assert build is sample_job.builds[1]
    assert sample_job.calls == ["build_by_number:4"]


def test_missing_number_returns_none(sample_job, caplog):
    with caplog.at_level(logging.DEBUG, logger="buildops.core.selectors"):
        assert resolve_build(sample_job, "99", {}) is None

    assert "no such build 99 in folder/app" in caplog.text


def test_number_never_falls_back_to_display_name(make_job):
    job = make_job(Build(7, "3"), Build(3, "three"))

    assert resolve_build(job, "3").number == 3
    assert resolve_build(job, "12") is None


def test_permalink_is_resolved(sample_job):
    assert resolve_build(sample_job, "lastSuccessfulBuild").number == 3
    assert resolve_build(sample_job, "lastBuild").number == 5
    assert resolve_build(sample_job, "lastFailedBuild").number == 4


def test_permalink_resolving_to_nothing_does_not_fall_back(make_job):
    job = make_job(
        Build(2, "lastSuccessfulBuild", RunStatus.FAILED),
        permalinks={"lastSuccessfulBuild": _NoneLink()},
    )

    assert resolve_build(job, "lastSuccessfulBuild") is None
    assert "all_builds" not in job.calls


def test_display_name_prefers_newest_build(sample_job):
    assert resolve_build(sample_job, "release").number == 5


def test_display_name_is_exact_and_case_sensitive(sample_job):
    assert resolve_build(sample_job, "Release") is None
    assert resolve_build(sample_job, "releas") is None


def test_default_display_name_matches(sample_job):
    assert resolve_build(sample_job, "#2").number == 2


def test_unknown_name_returns_none(sample_job, caplog):
    with caplog.at_level(logging.DEBUG, logger="buildops.core.selectors"):
        assert resolve_build(sample_job, "missing") is None

    assert "no such build missing in folder/app" in caplog.text


def test_unresolved_variable_returns_none_without_lookup(sample_job, caplog):
    with caplog.at_level(logging.DEBUG, logger="buildops.core.selectors"):
        assert resolve_build(sample_job, "${UNSET}", {"OTHER": "1"}) is None

    assert "unresolved variable ${UNSET}" in caplog.text
    assert sample_job.calls == []


def test_expanded_identifier_behaves_like_literal(sample_job):
    assert resolve_build(sample_job, "$b", {"b": "4"}) is resolve_build(
        sample_job, "4", {}
    )
    assert resolve_build(sample_job, "${n}", {"n": "nightly"}).number == 4


def test_number_and_unique_display_name_round_trip(sample_job):
    first = sample_job.builds[-1]

    assert resolve_build(sample_job, str(first.number)) is first
    assert resolve_build(sample_job, first.display_name) is first


@pytest.mark.parametrize("value", ["", "   ", None])
def test_empty_identifier_is_rejected(value):
    with pytest.raises(InvalidIdentifierError, match="empty"):
        SpecificBuildSelector(value)


def test_identifier_expanding_to_blank_is_rejected(sample_job):
    with pytest.raises(InvalidIdentifierError, match="empty"):
        resolve_build(sample_job, "${BLANK}", {"BLANK": " "})


def test_identifier_is_stripped():
    assert SpecificBuildSelector("  42 \n").identifier == "42"


def test_collaborator_errors_propagate():
    class _Broken:
        full_name = "broken"

        def build_by_number(self, number):
            raise OSError("backend down")

    with pytest.raises(OSError, match="backend down"):
        resolve_build(_Broken(), "1")


def test_permalink_errors_propagate(make_job):
    class _BrokenLink:
        name = "lastBuild"

        def resolve(self, job):
            raise OSError("permalink store unavailable")

    job = make_job(Build(1, "lastBuild"), permalinks={"lastBuild": _BrokenLink()})

    with pytest.raises(OSError, match="permalink store unavailable"):
        resolve_build(job, "lastBuild")


def test_build_enumeration_errors_propagate(make_job):
    job = make_job(Build(1, "nightly"))

    def _interrupted():
        yield Build(2, "other")
        raise KeyboardInterrupt

    job.all_builds = _interrupted

    with pytest.raises(KeyboardInterrupt):
        resolve_build(job, "nightly")
