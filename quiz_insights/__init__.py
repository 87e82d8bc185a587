"""Response grading, filtering and analytics for quiz forms"""
from quiz_insights.models import (
    Question, Form, Response, FilterCriteria,
    ScoreResult, AnswerFrequency, QuestionStats, ScoreBucket, AnalyticsReport
)
from quiz_insights.utils.analysis import normalize, is_correct, calculate_score
from quiz_insights.utils.filtering import filter_responses
from quiz_insights.utils.statistics import analyze

__version__ = "0.1.0"

score = calculate_score
