from shopfloor.services.report_service import ReportService

__all__ = ["ReportService"]
