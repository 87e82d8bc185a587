"""Response filtering by date range, score range and answer keyword"""
import logging
from typing import List, Optional, Sequence
from quiz_insights.models.filters import FilterCriteria
from quiz_insights.models.form import Form
from quiz_insights.models.response import Response
from quiz_insights.utils.analysis.score_utils import calculate_score
from quiz_insights.utils.formatting.answer_utils import flatten_answer
from quiz_insights.utils.time.timeutils import day_bounds_for

logger = logging.getLogger(__name__)


def passes_date_range(response: Response, criteria: FilterCriteria) -> bool:
    """Inclusive day bounds; responses without a timestamp are kept"""
    if not criteria.has_date_range or response.submitted_at is None:
        return True

    start, end = day_bounds_for(response.submitted_at, criteria.date_from, criteria.date_to)
    if start is not None and response.submitted_at < start:
        return False
    if end is not None and response.submitted_at > end:
        return False
    return True


def passes_score_range(form: Form, response: Response, criteria: FilterCriteria) -> bool:
    # only score when a bound is active
    if not criteria.has_score_range:
        return True

    earned = calculate_score(form, response).earned_points
    if criteria.min_score is not None and earned < criteria.min_score:
        return False
    if criteria.max_score is not None and earned > criteria.max_score:
        return False
    return True


def passes_keyword(response: Response, criteria: FilterCriteria) -> bool:
    """Case-insensitive substring match on one question's flattened answer"""
    if not criteria.has_keyword:
        return True

    answer_text = flatten_answer(response.answer_for(criteria.question_id), separator=" ")
    return criteria.answer_keyword.lower() in answer_text.lower()


def filter_responses(responses: Sequence[Response], form: Form,
                     criteria: Optional[FilterCriteria] = None) -> List[Response]:
    """Responses passing every active criterion, original order kept"""
    if criteria is None or criteria.is_empty:
        return list(responses)

    filtered = [
        r for r in responses
        if passes_date_range(r, criteria)
        and passes_score_range(form, r, criteria)
        and passes_keyword(r, criteria)
    ]
    logger.debug("Filtered %d of %d responses for form %s", len(filtered), len(responses), form.code)
    return filtered
