"""Validation utilities - document parsing and filter params"""
from .validation_utils import ValidationUtils
from .input_validator import InputValidator, FILTER_PARAM_NAMES
