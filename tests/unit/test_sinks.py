"""Unit tests for the local file report sink."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from contentforge.sinks import LocalFileReportSink, default_report_filename


class TestDefaultFilename:

    def test_format(self):
        now = datetime(2026, 3, 1, 9, 5, 7, tzinfo=timezone.utc)
        assert default_report_filename("csv", now) == "contentful-content-types-2026-03-01T09-05-07.csv"

    def test_converted_to_utc(self):
        now = datetime(2026, 3, 1, 11, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert default_report_filename("md", now) == "contentful-content-types-2026-03-01T09-00-00.md"

    def test_defaults_to_now(self):
        name = default_report_filename("txt")
        assert name.startswith("contentful-content-types-")
        assert name.endswith(".txt")


class TestLocalFileReportSink:

    def test_write_creates_directory(self, tmp_path):
        sink = LocalFileReportSink(tmp_path / "nested" / "reports")
        path = sink.write("héllo", "report.txt")
        assert path == tmp_path / "nested" / "reports" / "report.txt"
        assert path.read_text(encoding="utf-8") == "héllo"

    def test_overwrites_same_name(self, tmp_path):
        sink = LocalFileReportSink(tmp_path)
        sink.write("one", "r.txt")
        sink.write("two", "r.txt")
        assert (tmp_path / "r.txt").read_text(encoding="utf-8") == "two"

    def test_list_reports(self, tmp_path):
        sink = LocalFileReportSink(tmp_path)
        assert sink.list_reports() == []
        sink.write("a", "contentful-content-types-2026-01-01T00-00-00.txt")
        sink.write("b", "custom.txt")
        assert [p.name for p in sink.list_reports()] == [
            "contentful-content-types-2026-01-01T00-00-00.txt"
        ]

    def test_list_reports_missing_directory(self, tmp_path):
        assert LocalFileReportSink(tmp_path / "absent").list_reports() == []

    def test_default_base_path(self):
        sink = LocalFileReportSink()
        assert sink.base_path.name == "reports"
        assert sink.sink_name == "local_file"
