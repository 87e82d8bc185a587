"""Custom exceptions - SoC principle"""

class QuizInsightsError(Exception):
    """Base exception for the quiz insights package"""
    pass

class ValidationError(QuizInsightsError):
    """Malformed form or response document"""
    pass

class FormMismatchError(QuizInsightsError):
    """Response submitted against a different form"""
    pass
