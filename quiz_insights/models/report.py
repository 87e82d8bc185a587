"""Scoring and analytics result models"""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field
from quiz_insights.utils.formatting.number_utils import round_half_up


class ScoreResult(BaseModel):
    """Earned vs gradable points for one response"""
    earned_points: int = 0
    total_points: int = 0

    @property
    def percentage(self) -> int:
        if self.total_points <= 0:
            return 0
        return round_half_up(self.earned_points / self.total_points * 100)

    @property
    def has_gradable_questions(self) -> bool:
        return self.total_points > 0


class AnswerFrequency(BaseModel):
    answer: str
    count: int
    percentage: int
    is_expected: bool = False


class QuestionStats(BaseModel):
    """Answer frequency table for one question"""
    question_id: str
    question_type: str
    counts: Dict[str, int] = Field(default_factory=dict)  # first-seen order
    total: int = 0
    response_count: int = 0
    expected_answers: List[str] = Field(default_factory=list)

    def top_answers(self, limit: Optional[int] = None) -> List[AnswerFrequency]:
        """Most frequent answers, ties kept in first-seen order"""
        # sorted() is stable, so equal counts keep insertion order
        ranked = sorted(self.counts.items(), key=lambda item: -item[1])
        if limit is not None:
            ranked = ranked[:limit]
        expected = set(self.expected_answers)
        return [
            AnswerFrequency(
                answer=answer,
                count=count,
                percentage=round_half_up(count / self.response_count * 100) if self.response_count else 0,
                is_expected=answer in expected
            )
            for answer, count in ranked
        ]


class ScoreBucket(BaseModel):
    score: int
    count: int


class AnalyticsReport(BaseModel):
    """Cohort statistics over a filtered response set"""
    total_responses: int
    average_score: float
    max_gradable_points: int
    average_percentage: int
    pass_rate: int
    question_stats: Dict[str, QuestionStats] = Field(default_factory=dict)
    score_distribution: List[ScoreBucket] = Field(default_factory=list)
    score_bands: Dict[str, int] = Field(default_factory=dict)
