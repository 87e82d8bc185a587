"""Centralized Input Validation - storage documents and dashboard filter params"""
import logging
from typing import Any, Dict, List, Optional, Sequence
from pydantic import ValidationError as PydanticValidationError
from quiz_insights.exceptions.exceptions import ValidationError, FormMismatchError
from quiz_insights.models.filters import FilterCriteria
from quiz_insights.models.form import Form
from quiz_insights.models.response import Response
from .validation_utils import ValidationUtils

logger = logging.getLogger(__name__)

FILTER_PARAM_NAMES = ("dateFrom", "dateTo", "minScore", "maxScore", "questionId", "answerKeyword")


def _describe(error: PydanticValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg')}" if location else first.get("msg", str(error))


class InputValidator:
    """Turns raw documents and query params into validated models"""

    @staticmethod
    def validate_form_document(doc: Any) -> Form:
        if not isinstance(doc, dict):
            raise ValidationError("Form document must be an object")
        ValidationUtils.validate_required_fields(doc, "code")

        questions = doc.get("questions", [])
        if not isinstance(questions, list):
            raise ValidationError("Form questions must be a list")
        for index, question in enumerate(questions):
            if not isinstance(question, dict):
                raise ValidationError(f"Question {index + 1} must be an object")
            if question.get("id") in (None, ""):
                raise ValidationError(f"Question {index + 1} is missing an id")

        try:
            return Form.model_validate(doc)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid form document: {_describe(e)}") from e

    @staticmethod
    def validate_response_documents(docs: Optional[Sequence[Any]], form: Form) -> List[Response]:
        """Parse response documents, all of which must belong to the form"""
        responses = []
        for index, doc in enumerate(docs or []):
            if not isinstance(doc, dict):
                raise ValidationError(f"Response {index + 1} must be an object")
            try:
                response = Response.model_validate(doc)
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid response {index + 1}: {_describe(e)}") from e

            if response.form_code and form.code and response.form_code != form.code:
                raise FormMismatchError(
                    f"Response {index + 1} belongs to form {response.form_code}, not {form.code}"
                )
            responses.append(response)
        return responses

    @staticmethod
    def parse_filter_params(params: Optional[Dict[str, Any]]) -> FilterCriteria:
        """
        Build FilterCriteria from dashboard query params (camelCase strings).

        Blank params are unset. Unparseable dates and scores are ignored with a
        warning rather than rejected, so a half-typed filter never hides data.
        """
        params = params or {}
        values: Dict[str, Any] = {}

        for name, field in (("dateFrom", "date_from"), ("dateTo", "date_to")):
            raw = params.get(name)
            if raw in (None, ""):
                continue
            parsed = ValidationUtils.parse_date(raw)
            if parsed is None:
                logger.warning("Ignoring unparseable %s filter: %r", name, raw)
                continue
            values[field] = parsed

        for name, field in (("minScore", "min_score"), ("maxScore", "max_score")):
            raw = params.get(name)
            if raw in (None, ""):
                continue
            parsed = ValidationUtils.parse_leading_int(raw)
            if parsed is None:
                logger.warning("Ignoring unparseable %s filter: %r", name, raw)
                continue
            values[field] = parsed

        question_id = params.get("questionId")
        if question_id not in (None, ""):
            values["question_id"] = str(question_id)
        keyword = params.get("answerKeyword")
        if keyword not in (None, ""):
            values["answer_keyword"] = str(keyword)

        return FilterCriteria(**values)
