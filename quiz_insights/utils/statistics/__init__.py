"""Statistics utilities - cohort analytics"""
from .analytics_utils import analyze, is_passing, build_question_stats, build_score_distribution, build_score_bands
