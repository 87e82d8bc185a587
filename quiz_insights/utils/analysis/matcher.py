"""Per-type answer correctness checks"""
from typing import Any
from quiz_insights.config.settings import SHORT_ANSWER, MULTIPLE_CHOICE, CHECKBOX
from quiz_insights.models.form import Question
from quiz_insights.utils.analysis.normalizer import normalize, values_equal
from quiz_insights.utils.formatting.answer_utils import has_answer


def is_correct(question: Question, raw_answer: Any) -> bool:
    """Decide whether one raw answer satisfies the question's expected answer"""
    if not has_answer(raw_answer):
        return False
    if not question.is_gradable:
        return False

    expected = question.correct_answer

    if question.type == SHORT_ANSWER:
        return values_equal(normalize(raw_answer), normalize(expected))

    elif question.type == MULTIPLE_CHOICE:
        # option labels are compared verbatim
        return raw_answer == expected

    elif question.type == CHECKBOX:
        # Lenient: the expected option among the selections is enough,
        # extra selections are not penalized.
        return isinstance(raw_answer, (list, tuple)) and expected in raw_answer

    return False


def is_expected_answer(question: Question, answer_key: str) -> bool:
    """Flag a frequency-table key as the expected answer, same rules as is_correct"""
    if not question.is_gradable:
        return False
    if question.type == SHORT_ANSWER:
        return values_equal(normalize(answer_key), normalize(question.correct_answer))
    return answer_key == question.correct_answer
