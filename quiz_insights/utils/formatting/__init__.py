"""Formatting utilities - JSON sanitizing, rounding, answer flattening"""
from .json_utils import serialize_document, sanitize_document
from .number_utils import round_half_up
from .answer_utils import has_answer, answer_tokens, flatten_answer
