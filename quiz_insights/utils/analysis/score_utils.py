"""Score calculation utilities for response analysis"""
from functools import partial
from typing import List, Optional, Sequence
from quiz_insights.config.settings import ScoreBandConfig
from quiz_insights.models.form import Form
from quiz_insights.models.response import Response
from quiz_insights.models.report import ScoreResult
from quiz_insights.utils.analysis.matcher import is_correct
from quiz_insights.utils.processing.parallel_processor import ParallelProcessor

SCORE_BANDS = ("high", "medium", "low")

def calculate_max_points(form: Form) -> int:
    """One point per question with a correct answer"""
    return form.max_points

def calculate_score(form: Form, response: Response) -> ScoreResult:
    """Earned and gradable points for one response"""
    earned = 0
    total = 0

    for question in form.questions:
        if not question.is_gradable:
            continue
        total += 1
        if is_correct(question, response.answer_for(question.id)):
            earned += 1

    return ScoreResult(earned_points=earned, total_points=total)

def score_responses(form: Form, responses: Sequence[Response], threshold: Optional[int] = None) -> List[ScoreResult]:
    """Score many responses, results in input order"""
    return ParallelProcessor.map_ordered(list(responses), partial(calculate_score, form), threshold)

def score_band(percentage: float) -> str:
    """Dashboard colour band for a per-response percentage"""
    if percentage >= ScoreBandConfig.HIGH:
        return "high"
    if percentage >= ScoreBandConfig.MEDIUM:
        return "medium"
    return "low"
