from .report_handlers import ResponseListHandler, AnalyticsHandler
