"""Abstract interface (port) for storing rendered export documents."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from article_editor.domain.entities import ExportFormat


@dataclass
class StoredExport:
    """Result of writing one export document."""

    stored_path: str
    filename: str
    download_url: str
    size_bytes: int


class ExportStorage(ABC):
    """Port for export document storage — implemented in the infrastructure layer."""

    @abstractmethod
    async def store_export(self, document: str, export_format: ExportFormat) -> StoredExport:
        """Persist a rendered document and return where it can be downloaded.

        Args:
            document: The complete, self-contained HTML document.
            export_format: Requested kind; decides the filename suffix.

        Returns:
            StoredExport with the on-disk path and public download URL.
        """
        ...
