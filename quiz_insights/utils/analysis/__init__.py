"""Analysis utilities - normalization, matching, score calculation"""
from .normalizer import normalize, values_equal, display_key, parse_decimal, parse_number_words
from .matcher import is_correct, is_expected_answer
from .score_utils import calculate_score, calculate_max_points, score_responses, score_band, SCORE_BANDS
