"""Local filesystem storage for rendered export documents.

Storage layout:
    <export_dir>/articles_<YYYYMMDD_HHMMSS_ffffff>.html         — html exports
    <export_dir>/articles_<YYYYMMDD_HHMMSS_ffffff>.print.html   — print-ready (pdf) exports

The directory is served by the API under ``url_prefix`` so that the returned
download URL points straight at the file.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from article_editor.application.interfaces import ExportStorage, StoredExport
from article_editor.domain.entities import ExportFormat

logger = logging.getLogger(__name__)

_SUFFIXES = {
    ExportFormat.HTML: ".html",
    # No PDF engine: the print-oriented HTML is meant for the browser's print-to-PDF.
    ExportFormat.PDF: ".print.html",
}


def _datetime_stamp() -> str:
    """Return a UTC datetime stamp suitable for filenames: YYYYMMDD_HHMMSS_ffffff."""
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")


class LocalExportStorage(ExportStorage):
    """Infrastructure adapter that writes export documents to a local directory."""

    def __init__(self, export_dir: str, url_prefix: str = "/exports"):
        self._export_dir = Path(export_dir)
        self._export_dir.mkdir(parents=True, exist_ok=True)
        self._url_prefix = url_prefix.rstrip("/")

    async def store_export(self, document: str, export_format: ExportFormat) -> StoredExport:
        """Write ``document`` under a timestamped name and return its download URL."""
        filename = f"articles_{_datetime_stamp()}{_SUFFIXES[export_format]}"
        dest_path = self._export_dir / filename

        content = document.encode("utf-8")
        dest_path.write_bytes(content)

        logger.info("Stored export: %s (%d bytes)", dest_path, len(content))

        return StoredExport(
            stored_path=str(dest_path),
            filename=filename,
            download_url=f"{self._url_prefix}/{filename}",
            size_bytes=len(content),
        )
