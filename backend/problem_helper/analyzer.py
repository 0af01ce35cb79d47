import logging

from .config import Settings
from .leetcode import fetch_problem_info
from .llm import generate_analysis
from .models import AnalysisResponse
from .youtube import search_videos

logger = logging.getLogger(__name__)


def analyze_problem(slug: str, settings: Settings) -> AnalysisResponse:
    """Problem info, Gemini analysis and YouTube links for one slug.

    Only the problem lookup can fail; its UpstreamError/NotFoundError propagates.
    The analysis and video steps degrade on their own.
    """
    logger.info("Analyzing problem: %s", slug)
    problem = fetch_problem_info(slug, settings)
    logger.info("Problem info: %s (%s)", problem.title, problem.difficulty)

    analysis = generate_analysis(problem.title, problem.id, problem.difficulty, settings)
    videos = search_videos(problem.title, settings)
    logger.info("Found %d YouTube videos", len(videos))

    response = AnalysisResponse(
        title=problem.title,
        problem_id=problem.id,
        difficulty=problem.difficulty,
        slug=slug,
        algorithms=analysis.algorithms,
        hints=analysis.hints,
        youtube_links=videos,
    )
    logger.info("Analysis complete for: %s", problem.title)
    return response
