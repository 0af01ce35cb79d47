import json
import logging
import re
from typing import Any, List, Optional, Sequence

import requests

from .config import Settings
from .errors import RepairError
from .models import AnalysisResult

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

# Opening fences may carry a language tag (```json, ```JSON, ```text); closing ones are bare.
_FENCE_RE = re.compile(r"```[A-Za-z0-9_+-]*\n?")

FALLBACK_HINTS = (
    "Start by understanding the problem constraints and requirements",
    "Consider the time and space complexity requirements",
    "Think about common patterns for this type of problem",
)


def build_prompt(title: str, problem_id: str, difficulty: str, languages: Sequence[str]) -> str:
    focus = " and ".join(languages) if languages else "C++ and Java"
    schema_example = """
{
    "algorithms": "Your algorithm recommendation as a single string",
    "hints": [
        "First hint as a string",
        "Second hint as a string",
        "Third hint as a string"
    ]
}
"""
    return (
        f'For the LeetCode problem titled: "{title}" (ID: {problem_id}, Difficulty: {difficulty}):\n\n'
        "1. Recommend specific algorithms and data structures to use with complexity analysis\n"
        "2. Provide progressive hints as an array of strings (NOT objects) - "
        "make each hint more specific and actionable\n"
        f"3. Focus on {focus} implementations\n\n"
        "IMPORTANT: Return ONLY valid JSON in this exact format:"
        f"{schema_example}\n"
        "Do NOT include any markdown formatting, code blocks, or additional text outside the JSON."
    )


def _call_gemini(prompt: str, settings: Settings) -> Optional[str]:
    url = GEMINI_URL.format(model=settings.gemini_model)
    payload = {
        "contents": [
            {
                "role": "user",
                "parts": [{"text": prompt}],
            }
        ],
        "generationConfig": {
            "temperature": 0.2,
            "topP": 0.95,
            "topK": 40,
        },
    }

    try:
        r = requests.post(
            url,
            params={"key": settings.gemini_api_key},
            json=payload,
            timeout=settings.gemini_timeout,
        )
        if r.status_code != 200:
            logger.warning("Gemini returned HTTP %s", r.status_code)
            return None
        response_data = r.json()
        candidates = response_data.get("candidates", [])
        if not candidates:
            return None
        parts = candidates[0].get("content", {}).get("parts", [])
        if not parts:
            return None
        return str(parts[0].get("text", ""))
    except (requests.RequestException, ValueError, AttributeError) as exc:
        logger.warning("Gemini request failed: %s", exc)
        return None


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    # Matches JSON.stringify: true/false/null, compact separators.
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _coerce_hints(hints: List[Any]) -> List[str]:
    coerced = []
    for index, hint in enumerate(hints, start=1):
        if hint is None or isinstance(hint, (dict, list)):
            coerced.append(f"Hint {index}: {_stringify(hint)}")
        else:
            coerced.append(_stringify(hint))
    return coerced


def repair_analysis(raw_text: str) -> AnalysisResult:
    """Turn Gemini's free-form reply into an AnalysisResult.

    Fence markers are dropped, the span from the first "{" to the last "}" is
    parsed as JSON and checked for a truthy ``algorithms`` and a non-empty
    ``hints`` list. Object-like hints become ``Hint <n>: <json>``.
    Raises RepairError on anything else.
    """
    cleaned = _FENCE_RE.sub("", (raw_text or "").strip())

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end == -1 or end <= start:
        raise RepairError("No valid JSON found in Gemini response")

    candidate = cleaned[start : end + 1]
    logger.debug("Extracted JSON string: %s", candidate)
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise RepairError(f"Gemini response is not valid JSON: {exc}") from exc

    if not isinstance(parsed, dict):
        raise RepairError("Gemini response is not a JSON object")
    algorithms = parsed.get("algorithms")
    hints = parsed.get("hints")
    if not algorithms or not isinstance(hints, list) or not hints:
        raise RepairError("Invalid response structure from Gemini")

    return AnalysisResult(algorithms=_stringify(algorithms), hints=_coerce_hints(hints))


def fallback_analysis(title: str, difficulty: str) -> AnalysisResult:
    return AnalysisResult(
        algorithms=(
            f"Error generating analysis for {title}. "
            f"Try manual analysis using {difficulty} level approaches."
        ),
        hints=list(FALLBACK_HINTS),
    )


def generate_analysis(title: str, problem_id: str, difficulty: str, settings: Settings) -> AnalysisResult:
    """Ask Gemini for algorithms and hints; never raises, degrades to fallback_analysis."""
    prompt = build_prompt(title, problem_id, difficulty, settings.target_languages)
    raw = _call_gemini(prompt, settings)
    if raw is None:
        return fallback_analysis(title, difficulty)

    logger.debug("Raw Gemini response: %s", raw)
    try:
        return repair_analysis(raw)
    except RepairError as exc:
        logger.warning("Gemini reply for %r unusable, using fallback: %s", title, exc)
        return fallback_analysis(title, difficulty)
