"""Analytics Utils - cohort statistics over a filtered response set"""
import logging
from typing import Dict, List, Optional, Sequence
from quiz_insights.config.settings import SHORT_ANSWER, ScoringConfig
from quiz_insights.models.form import Form, Question
from quiz_insights.models.response import Response
from quiz_insights.models.report import AnalyticsReport, QuestionStats, ScoreBucket, ScoreResult
from quiz_insights.utils.analysis.matcher import is_expected_answer
from quiz_insights.utils.analysis.normalizer import normalize, display_key
from quiz_insights.utils.analysis.score_utils import score_responses, score_band, SCORE_BANDS
from quiz_insights.utils.formatting.answer_utils import answer_tokens
from quiz_insights.utils.formatting.number_utils import round_half_up

logger = logging.getLogger(__name__)


def is_passing(result: ScoreResult) -> bool:
    """Responses with no gradable questions never pass"""
    if result.total_points <= 0:
        return False
    return result.earned_points / result.total_points >= ScoringConfig.PASS_THRESHOLD


def answer_key(question: Question, token: str) -> str:
    """Counting key: normalized for short answers, verbatim otherwise"""
    if question.type == SHORT_ANSWER:
        return display_key(normalize(token))
    return token


def build_question_stats(form: Form, responses: Sequence[Response]) -> Dict[str, QuestionStats]:
    """Answer frequency table per question, keys in first-seen order"""
    stats = {}
    for question in form.questions:
        counts: Dict[str, int] = {}
        total = 0
        for response in responses:
            for token in answer_tokens(response.answer_for(question.id)):
                key = answer_key(question, token)
                counts[key] = counts.get(key, 0) + 1
                total += 1

        stats[question.id] = QuestionStats(
            question_id=question.id,
            question_type=question.type,
            counts=counts,
            total=total,
            response_count=len(responses),
            expected_answers=[key for key in counts if is_expected_answer(question, key)]
        )
    return stats


def build_score_distribution(results: Sequence[ScoreResult], max_points: int) -> List[ScoreBucket]:
    """Histogram of earned points over 0..max_points"""
    buckets = {score: 0 for score in range(max_points + 1)}
    for result in results:
        buckets[result.earned_points] = buckets.get(result.earned_points, 0) + 1
    return [ScoreBucket(score=score, count=count) for score, count in sorted(buckets.items())]


def build_score_bands(results: Sequence[ScoreResult]) -> Dict[str, int]:
    bands = {band: 0 for band in SCORE_BANDS}
    for result in results:
        bands[score_band(result.percentage)] += 1
    return bands


def analyze(form: Form, responses: Sequence[Response]) -> Optional[AnalyticsReport]:
    """
    Cohort report for a filtered response set, None when there is nothing
    to aggregate.

    average_percentage is the pooled ratio of earned points to possible
    points (n * max_gradable_points), not the mean of per-response
    percentages. Both agree while every response is scored against the
    same form.
    """
    if not responses:
        return None

    responses = list(responses)
    response_count = len(responses)
    max_points = form.max_points

    # score first, then reduce over the ordered results
    results = score_responses(form, responses)
    total_earned = sum(result.earned_points for result in results)
    passing_count = sum(1 for result in results if is_passing(result))

    average_percentage = 0
    if max_points > 0:
        average_percentage = round_half_up(total_earned / (response_count * max_points) * 100)

    report = AnalyticsReport(
        total_responses=response_count,
        average_score=round_half_up(total_earned / response_count, 1),
        max_gradable_points=max_points,
        average_percentage=average_percentage,
        pass_rate=round_half_up(passing_count / response_count * 100),
        question_stats=build_question_stats(form, responses),
        score_distribution=build_score_distribution(results, max_points),
        score_bands=build_score_bands(results)
    )
    logger.debug("Analyzed %d responses for form %s: pass rate %d%%", response_count, form.code, report.pass_rate)
    return report
