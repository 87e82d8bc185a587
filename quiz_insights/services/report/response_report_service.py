"""Response Report Service - Business Logic Layer (SoC)"""
from typing import Any, Dict, Optional, Sequence
from quiz_insights.config.log_config import get_logger
from quiz_insights.services.report.report_formatter import ReportFormatter
from quiz_insights.utils.filtering.response_filter import filter_responses
from quiz_insights.utils.formatting.json_utils import sanitize_document
from quiz_insights.utils.statistics.analytics_utils import analyze
from quiz_insights.utils.validation.input_validator import InputValidator, FILTER_PARAM_NAMES

logger = get_logger("services.report")

class ResponseReportService:
    """Builds the moderator views from storage documents and filter params"""

    def __init__(self, formatter: Optional[ReportFormatter] = None):
        self.formatter = formatter or ReportFormatter()

    def get_response_list(self, form_doc: Dict, response_docs: Sequence[Dict], params: Optional[Dict] = None) -> Dict:
        """Filtered individual responses with per-question correctness"""
        form, responses, filtered, params = self._load(form_doc, response_docs, params)

        rows = [self.formatter.format_response_row(form, r) for r in filtered]
        result = {
            "success": True,
            "formCode": form.code,
            "formTitle": form.title,
            "totalResponses": len(responses),
            "filteredCount": len(filtered),
            "filters": self._applied_filters(params),
            "responses": rows
        }
        return sanitize_document(result)

    def get_analytics(self, form_doc: Dict, response_docs: Sequence[Dict], params: Optional[Dict] = None) -> Dict:
        """Cohort analytics over the filtered responses; analytics is None when empty"""
        form, responses, filtered, params = self._load(form_doc, response_docs, params)

        report = analyze(form, filtered)
        if report is None:
            logger.info("No responses to analyze for form %s", form.code)

        result = {
            "success": True,
            "formCode": form.code,
            "formTitle": form.title,
            "totalResponses": len(responses),
            "filteredCount": len(filtered),
            "filters": self._applied_filters(params),
            "analytics": self.formatter.format_analytics(form, report)
        }
        return sanitize_document(result)

    def _load(self, form_doc: Dict, response_docs: Sequence[Dict], params: Optional[Dict]):
        form = InputValidator.validate_form_document(form_doc)
        responses = InputValidator.validate_response_documents(response_docs, form)
        params = params or {}
        criteria = InputValidator.parse_filter_params(params)
        filtered = filter_responses(responses, form, criteria)
        return form, responses, filtered, params

    @staticmethod
    def _applied_filters(params: Dict[str, Any]) -> Dict[str, Any]:
        return {name: params.get(name, "") for name in FILTER_PARAM_NAMES}
