from .report_formatter import ReportFormatter
from .response_report_service import ResponseReportService
