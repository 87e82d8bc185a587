from quiz_insights import score
from quiz_insights.models import Form, Question, Response, ScoreResult
from quiz_insights.utils.analysis.score_utils import (
    calculate_score, calculate_max_points, score_responses, score_band
)
from quiz_insights.utils.processing.parallel_processor import ParallelProcessor


def test_one_right_one_wrong_out_of_two_gradable():
    form = Form(code="F1", questions=[
        Question(id="a", type="short_answer", correct_answer="4"),
        Question(id="b", type="multiple_choice", options=["x", "y"], correct_answer="x"),
        Question(id="c", type="short_answer"),
    ])
    response = Response(answers={"a": "four", "b": "y", "c": "whatever"})

    assert score(form, response) == ScoreResult(earned_points=1, total_points=2)


def test_total_counts_gradable_questions_even_when_unanswered(quiz_form):
    result = calculate_score(quiz_form, Response(answers={}))
    assert result.earned_points == 0
    assert result.total_points == 3
    assert calculate_max_points(quiz_form) == 3


def test_scores_for_fixture_responses(quiz_form, responses):
    earned = [calculate_score(quiz_form, r).earned_points for r in responses]
    assert earned == [3, 1, 1, 0]


def test_percentage_rounds_half_up_and_handles_no_gradable_points():
    assert ScoreResult(earned_points=1, total_points=3).percentage == 33
    assert ScoreResult(earned_points=1, total_points=8).percentage == 13
    assert ScoreResult(earned_points=0, total_points=0).percentage == 0
    assert not ScoreResult(earned_points=0, total_points=0).has_gradable_questions


def test_score_bands():
    assert score_band(100) == "high"
    assert score_band(80) == "high"
    assert score_band(79) == "medium"
    assert score_band(50) == "medium"
    assert score_band(49) == "low"


def test_parallel_scoring_matches_inline_order(quiz_form, responses):
    inline = score_responses(quiz_form, responses, threshold=len(responses) + 1)
    pooled = score_responses(quiz_form, responses, threshold=1)
    assert pooled == inline
    assert [r.earned_points for r in pooled] == [3, 1, 1, 0]


def test_parallel_processor_edges():
    assert ParallelProcessor.map_ordered([], str) == []
    assert ParallelProcessor.calculate_optimal_workers(1) == 1
    assert ParallelProcessor.map_ordered([3, 1, 2], lambda x: x * 2, threshold=1) == [6, 2, 4]
