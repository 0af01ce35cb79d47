import logging
from typing import Any, Dict

import requests
from pydantic import ValidationError

from .config import Settings
from .errors import NotFoundError, UpstreamError
from .models import ProblemInfo

logger = logging.getLogger(__name__)

LEETCODE_GRAPHQL_URL = "https://leetcode.com/graphql"

QUESTION_QUERY = """
query questionData($titleSlug: String!) {
    question(titleSlug: $titleSlug) {
        questionId
        title
        difficulty
    }
}
"""


def _build_payload(slug: str) -> Dict[str, Any]:
    return {
        "operationName": "questionData",
        "variables": {"titleSlug": slug},
        "query": QUESTION_QUERY,
    }


def fetch_problem_info(slug: str, settings: Settings) -> ProblemInfo:
    """Look up id, title and difficulty for a problem slug.

    Raises UpstreamError when LeetCode cannot be queried and NotFoundError when
    it answers with no question for the slug. Both abort the request.
    """
    headers = {
        "Content-Type": "application/json",
        "Referer": f"https://leetcode.com/problems/{slug}/",
    }
    try:
        r = requests.post(
            LEETCODE_GRAPHQL_URL,
            json=_build_payload(slug),
            headers=headers,
            timeout=settings.upstream_timeout,
        )
        r.raise_for_status()
        question = (r.json().get("data") or {}).get("question")
    except (requests.RequestException, ValueError, AttributeError) as exc:
        raise UpstreamError(f"LeetCode API error: {exc}") from exc

    if not question:
        raise NotFoundError("Problem not found on LeetCode")

    try:
        return ProblemInfo.model_validate(question)
    except ValidationError as exc:
        raise UpstreamError(f"LeetCode API error: unexpected question payload ({exc.error_count()} errors)") from exc
