"""
Build Model
===========
Pydantic models for the build records returned by the BuddyBuild API.

The JSON shape is fixed (snake_case keys). Decoding is lenient in the same
places the upstream is: missing or null fields take their zero value, and
missing timestamps become the zero time (0001-01-01T00:00:00Z).

Fields:
    build_number   — sequential build number
    build_status   — free-form upstream status ("success", "failed", ...)
    commit_info    — the commit the build ran against
    created_at     — when the build was queued
    started_at     — when it started running
    finished_at    — when it finished
    finished       — whether the build has completed
"""
from datetime import datetime, timedelta, timezone
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.services import metrics

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class CommitInfo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    author: str = ""
    branch: str = ""
    commit_sha: str = ""
    url: str = Field("", alias="html_url")
    message: str = ""
    tags: List[str] = Field(default_factory=list)

    @field_validator("author", "branch", "commit_sha", "url", "message", mode="before")
    @classmethod
    def _null_string(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, v: Any) -> Any:
        return [] if v is None else v


class Build(BaseModel):
    model_config = ConfigDict(frozen=True)

    build_number: int = 0
    build_status: str = ""
    commit_info: CommitInfo = Field(default_factory=CommitInfo)
    created_at: datetime = ZERO_TIME
    finished: bool = False
    finished_at: datetime = ZERO_TIME
    started_at: datetime = ZERO_TIME

    @field_validator("created_at", "started_at", "finished_at", mode="before")
    @classmethod
    def _null_timestamp(cls, v: Any) -> Any:
        return ZERO_TIME if v is None else v

    @field_validator("created_at", "started_at", "finished_at")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        # Naive and aware values cannot be subtracted from each other.
        return v.replace(tzinfo=timezone.utc) if v.tzinfo is None else v

    @field_validator("build_status", mode="before")
    @classmethod
    def _null_status(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("commit_info", mode="before")
    @classmethod
    def _null_commit(cls, v: Any) -> Any:
        return {} if v is None else v

    def queue_duration(self) -> int:
        return metrics.queue_duration(self)

    def build_duration(self) -> int:
        return metrics.build_duration(self)

    def total_duration(self) -> timedelta:
        return metrics.total_duration(self)
