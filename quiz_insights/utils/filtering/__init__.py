"""Filtering utilities - narrow a response collection"""
from .response_filter import filter_responses, passes_date_range, passes_score_range, passes_keyword
