"""Exceptions and centralized error mapping"""
from .exceptions import QuizInsightsError, ValidationError, FormMismatchError
from .error_handler import handle_service_error
