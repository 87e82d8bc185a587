"""Data models - forms, responses, filter criteria and report results"""
from .form import Question, Form
from .response import Response
from .filters import FilterCriteria
from .report import ScoreResult, AnswerFrequency, QuestionStats, ScoreBucket, AnalyticsReport
