"""Report sinks — where finished report strings are persisted."""

from contentforge.sinks.local_file import LocalFileReportSink, default_report_filename

__all__ = ["LocalFileReportSink", "default_report_filename"]
