"""
Build Model Tests
=================
Decoding of upstream build JSON into Build/CommitInfo.
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.models.build import Build, CommitInfo, ZERO_TIME


def _payload(**overrides):
    payload = {
        "build_number": 4821,
        "build_status": "success",
        "commit_info": {
            "author": "Sebastian Kaspari",
            "branch": "master",
            "commit_sha": "9f2c1e0d4b7a8c3e5f6a1b2c3d4e5f6a7b8c9d0e",
            "html_url": "https://github.com/mozilla-mobile/fennec/commit/9f2c1e0",
            "message": "Bug 1400000 - Update toolbar colours",
            "tags": ["nightly", "v57.0"],
        },
        "created_at": "2026-01-15T09:30:00Z",
        "finished": True,
        "finished_at": "2026-01-15T09:41:10Z",
        "started_at": "2026-01-15T09:31:05Z",
    }
    payload.update(overrides)
    return payload


def test_decodes_full_payload():
    build = Build.model_validate(_payload())

    assert build.build_number == 4821
    assert build.build_status == "success"
    assert build.finished is True
    assert build.created_at == datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)
    assert build.commit_info.url == "https://github.com/mozilla-mobile/fennec/commit/9f2c1e0"
    assert build.commit_info.tags == ["nightly", "v57.0"]


def test_null_and_missing_fields_take_zero_values():
    build = Build.model_validate({
        "build_number": 7,
        "commit_info": {"author": None, "tags": None},
        "started_at": None,
    })

    assert build.build_status == ""
    assert build.finished is False
    assert build.commit_info.author == ""
    assert build.commit_info.tags == []
    assert build.created_at == ZERO_TIME
    assert build.started_at == ZERO_TIME
    assert build.finished_at == ZERO_TIME


def test_explicit_zero_time_string():
    build = Build.model_validate(_payload(finished_at="0001-01-01T00:00:00Z", finished=False))
    assert build.finished_at == ZERO_TIME


def test_naive_timestamps_are_treated_as_utc():
    build = Build.model_validate(_payload(created_at="2026-01-15T09:30:00"))
    assert build.created_at.tzinfo is not None
    assert build.queue_duration() == (65 + 15) // 15


def test_unknown_keys_are_ignored():
    build = Build.model_validate(_payload(links={"self": "x"}, app_id="abc"))
    assert build.build_number == 4821


def test_wrong_types_are_rejected():
    with pytest.raises(ValidationError):
        Build.model_validate(_payload(build_number="not-a-number"))


def test_commit_info_accepts_field_name_or_alias():
    assert CommitInfo(url="https://example.test").url == "https://example.test"
    assert CommitInfo.model_validate({"html_url": "https://example.test"}).url == "https://example.test"


def test_builds_are_immutable():
    build = Build.model_validate(_payload())
    with pytest.raises(ValidationError):
        build.build_number = 1
