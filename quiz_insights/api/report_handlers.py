"""Report handlers - Presentation Layer (SoC), transport agnostic"""
from typing import Dict, Optional, Sequence, Tuple
from quiz_insights.services.report.response_report_service import ResponseReportService
from quiz_insights.exceptions.error_handler import handle_service_error

class ResponseListHandler:
    def __init__(self, service: Optional[ResponseReportService] = None):
        self.service = service or ResponseReportService()

    def get(self, form_doc: Dict, response_docs: Sequence[Dict], params: Optional[Dict] = None) -> Tuple[dict, int]:
        try:
            result = self.service.get_response_list(form_doc, response_docs, params)
            return result, 200
        except Exception as e:
            return handle_service_error(e)

class AnalyticsHandler:
    def __init__(self, service: Optional[ResponseReportService] = None):
        self.service = service or ResponseReportService()

    def get(self, form_doc: Dict, response_docs: Sequence[Dict], params: Optional[Dict] = None) -> Tuple[dict, int]:
        try:
            result = self.service.get_analytics(form_doc, response_docs, params)
            return result, 200
        except Exception as e:
            return handle_service_error(e)
