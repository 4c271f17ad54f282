"""Domain entities for article export — output kinds and the export outcome."""

from dataclasses import dataclass, field
from enum import Enum


class ExportFormat(str, Enum):
    """Supported export output kinds.

    Both kinds come out of the same HTML pipeline; ``PDF`` only switches to
    the print-oriented wrapping (page rules and breaks).
    """

    HTML = "html"
    PDF = "pdf"


@dataclass
class ExportResult:
    """Outcome of an export request.

    ``success`` is False when nothing could be exported (soft failure).
    """

    success: bool
    download_url: str | None = None
    article_count: int = 0
    missing_ids: list[int] = field(default_factory=list)
