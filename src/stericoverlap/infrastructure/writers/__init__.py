from .clash_report_writer import ClashReportWriter

__all__ = ["ClashReportWriter"]
