"""Local file sink — writes finished reports under an output directory.

Layout: {base_path}/{filename}

Default file names carry a second-precision UTC timestamp so successive
runs never overwrite each other.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger(__name__)

REPORT_PREFIX = "contentful-content-types"


def default_report_filename(extension: str, now: datetime | None = None) -> str:
    """``contentful-content-types-<YYYY-MM-DDTHH-MM-SS>.<extension>``."""
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    stamp = moment.strftime("%Y-%m-%dT%H-%M-%S")
    return f"{REPORT_PREFIX}-{stamp}.{extension}"


class LocalFileReportSink:
    """Writes report strings to files on the local disk.

    Parameters
    ----------
    base_path:
        Directory for report files.  Created on first write.  Defaults to
        ``reports``.
    """

    def __init__(self, base_path: Path | str | None = None) -> None:
        self._base = Path(base_path) if base_path else Path("reports")

    @property
    def sink_name(self) -> str:
        return "local_file"

    @property
    def base_path(self) -> Path:
        return self._base

    def write(self, content: str, filename: str) -> Path:
        """Write *content* to ``{base_path}/{filename}`` and return the path.

        Raises ``OSError`` when the directory or file cannot be written.
        """
        self._base.mkdir(parents=True, exist_ok=True)
        target = self._base / filename
        target.write_text(content, encoding="utf-8")
        logger.info("LocalFileReportSink: wrote %d bytes to %s", len(content.encode("utf-8")), target)
        return target

    def list_reports(self) -> list[Path]:
        """All report files previously written to this directory."""
        if not self._base.exists():
            return []
        return sorted(self._base.glob(f"{REPORT_PREFIX}-*"))
