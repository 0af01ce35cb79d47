from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CamelModel(BaseModel):
    # Wire format is camelCase; Python attributes stay snake_case.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProblemInfo(BaseModel):
    id: str = Field(alias="questionId", description="LeetCode frontend question id")
    title: str
    difficulty: Literal["Easy", "Medium", "Hard"]

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class AnalysisResult(BaseModel):
    algorithms: str
    hints: List[str] = Field(min_length=1)


class VideoResult(CamelModel):
    video_id: str
    title: str
    channel_title: str
    thumbnail_url: str = ""
    published_at: str


class AnalyzeRequest(BaseModel):
    # Left optional so a missing slug gets the fixed 400 payload instead of a validation error.
    slug: Optional[str] = None


class AnalysisResponse(CamelModel):
    title: str
    problem_id: str
    difficulty: str
    slug: str
    algorithms: str
    hints: List[str]
    youtube_links: List[VideoResult]
    timestamp: str = Field(default_factory=utc_timestamp)
