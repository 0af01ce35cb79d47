"""Problem metadata lookup against the LeetCode GraphQL endpoint."""

import pytest
import requests
from conftest import FakeResponse

from problem_helper import leetcode
from problem_helper.errors import NotFoundError, UpstreamError
from problem_helper.leetcode import fetch_problem_info


def test_fetch_returns_problem_info(monkeypatch, settings):
    seen = {}

    def fake_post(url, json=None, headers=None, timeout=None):
        seen.update(url=url, json=json, headers=headers, timeout=timeout)
        return FakeResponse(
            {"data": {"question": {"questionId": "1", "title": "Two Sum", "difficulty": "Easy"}}}
        )

    monkeypatch.setattr(leetcode.requests, "post", fake_post)
    problem = fetch_problem_info("two-sum", settings)

    assert problem.id == "1"
    assert problem.title == "Two Sum"
    assert problem.difficulty == "Easy"
    assert seen["url"] == "https://leetcode.com/graphql"
    assert seen["json"]["variables"] == {"titleSlug": "two-sum"}
    assert seen["json"]["operationName"] == "questionData"
    assert seen["headers"]["Referer"] == "https://leetcode.com/problems/two-sum/"
    assert seen["timeout"] == settings.upstream_timeout


def test_query_requests_only_three_fields():
    selected = {line.strip() for line in leetcode.QUESTION_QUERY.splitlines()}
    assert {"questionId", "title", "difficulty"} <= selected
    assert "content" not in selected


def test_unknown_slug_raises_not_found(monkeypatch, settings):
    monkeypatch.setattr(
        leetcode.requests, "post", lambda *a, **kw: FakeResponse({"data": {"question": None}})
    )
    with pytest.raises(NotFoundError, match="Problem not found on LeetCode"):
        fetch_problem_info("no-such-problem", settings)


def test_transport_error_raises_upstream(monkeypatch, settings):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("Name or service not known")

    monkeypatch.setattr(leetcode.requests, "post", boom)
    with pytest.raises(UpstreamError, match="^LeetCode API error: Name or service not known"):
        fetch_problem_info("two-sum", settings)


def test_http_error_raises_upstream(monkeypatch, settings):
    monkeypatch.setattr(leetcode.requests, "post", lambda *a, **kw: FakeResponse({}, status_code=503))
    with pytest.raises(UpstreamError) as excinfo:
        fetch_problem_info("two-sum", settings)
    assert not isinstance(excinfo.value, NotFoundError)


def test_undecodable_body_raises_upstream(monkeypatch, settings):
    monkeypatch.setattr(
        leetcode.requests, "post", lambda *a, **kw: FakeResponse(json_error=ValueError("Expecting value"))
    )
    with pytest.raises(UpstreamError, match="LeetCode API error"):
        fetch_problem_info("two-sum", settings)


def test_unexpected_difficulty_raises_upstream(monkeypatch, settings):
    payload = {"data": {"question": {"questionId": "1", "title": "Two Sum", "difficulty": "Trivial"}}}
    monkeypatch.setattr(leetcode.requests, "post", lambda *a, **kw: FakeResponse(payload))
    with pytest.raises(UpstreamError):
        fetch_problem_info("two-sum", settings)
