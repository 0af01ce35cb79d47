import logging
from typing import Any, Dict, List

import requests

from .config import Settings
from .models import VideoResult

logger = logging.getLogger(__name__)

YOUTUBE_SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
MAX_RESULTS = 5


def _to_video(item: Dict[str, Any]) -> VideoResult:
    snippet = item["snippet"]
    thumbnail = ((snippet.get("thumbnails") or {}).get("medium") or {}).get("url") or ""
    return VideoResult(
        video_id=item["id"]["videoId"],
        title=snippet["title"],
        channel_title=snippet["channelTitle"],
        thumbnail_url=thumbnail,
        published_at=snippet["publishedAt"],
    )


def search_videos(query: str, settings: Settings) -> List[VideoResult]:
    """Relevance-ordered explanation videos for a problem title; [] on any failure."""
    params = {
        "part": "snippet",
        "q": f"LeetCode {query} solution explanation",
        "type": "video",
        "order": "relevance",
        "maxResults": MAX_RESULTS,
        "key": settings.youtube_api_key,
    }

    try:
        r = requests.get(YOUTUBE_SEARCH_URL, params=params, timeout=settings.upstream_timeout)
        r.raise_for_status()
        items = r.json().get("items", [])
        return [_to_video(item) for item in items[:MAX_RESULTS]]
    except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError) as exc:
        logger.warning("YouTube search failed: %s", exc)
        return []
