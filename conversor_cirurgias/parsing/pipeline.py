"""
Conversion Pipeline

Orchestrates the conversion of one hospital export:
decode -> sanitize -> parse -> extract -> [group by month] -> spreadsheets.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from conversor_cirurgias.common.logging_config import get_logger
from conversor_cirurgias.common.models import SurgeryRecord
from conversor_cirurgias.common.settings import SUPPORTED_ENCODING
from conversor_cirurgias.exporters.excel_exporter import Artifact, ExcelRecordSink
from .config.layout import ExportLayout, DEFAULT_LAYOUT
from .exceptions import ConversionError, EmptyResultError
from .extractor import SurgeryExtractor
from .grouping import group_by_month
from .sanitizer import sanitize_xml
from .tree import parse_document

logger = get_logger(__name__)


@dataclass
class ConversionResult:
    """
    Outcome of one conversion.

    Attributes:
        records: Extracted surgeries in document order
        groups: Month key -> records (None for the ungrouped variant)
        artifacts: Spreadsheets produced, one per group
        filename: Name of the uploaded export, if known
    """
    records: List[SurgeryRecord]
    groups: Optional[Dict[str, List[SurgeryRecord]]] = None
    artifacts: List[Artifact] = field(default_factory=list)
    filename: Optional[str] = None

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def artifact_count(self) -> int:
        return len(self.artifacts)

    def month_counts(self) -> Dict[str, int]:
        if self.groups is None:
            return {}
        return {key: len(records) for key, records in self.groups.items()}

    def summary_message(self) -> str:
        return f"{self.record_count} registros processados em {self.artifact_count} arquivo(s)."


class ConversionPipeline:
    """
    Main orchestrator for the XML -> Excel conversion.

    Each call works on its own freshly parsed tree; nothing is cached
    between calls.
    """

    def __init__(self, layout: ExportLayout = DEFAULT_LAYOUT, sink: ExcelRecordSink = None):
        self.layout = layout
        self.sink = sink or ExcelRecordSink()

    @staticmethod
    def decode(raw: bytes) -> str:
        """Decodes the export bytes; ISO-8859-1 maps every byte, so this never fails."""
        return raw.decode(SUPPORTED_ENCODING)

    def extract_text(self, text: str, filename: str = None) -> List[SurgeryRecord]:
        """
        Pure extraction from decoded text.

        Raises:
            ParseError: The text is not well-formed XML after sanitizing.
            StructuralMismatchError: A patient group has no surgery list.
        """
        root = parse_document(sanitize_xml(text), filename=filename)
        return SurgeryExtractor(self.layout, filename=filename).extract(root)

    def run(self, raw: bytes, filename: str = None, monthly: bool = False) -> ConversionResult:
        """
        Converts raw export bytes into spreadsheets.

        Args:
            raw: File content as uploaded
            filename: Original file name, used in messages
            monthly: One spreadsheet per month instead of a single one

        Raises:
            EmptyResultError: The export holds no eligible surgery.
            ConversionError: Any other fatal condition (parse, structure, date).
        """
        logger.info("Conversion started.", filename=filename, size_bytes=len(raw), monthly=monthly)

        try:
            records = self.extract_text(self.decode(raw), filename=filename)

            if not records:
                raise EmptyResultError(filename=filename)

            logger.info("Records extracted.", filename=filename, record_count=len(records))

            if monthly:
                groups = group_by_month(records)
                artifacts = self.sink.build_monthly(groups)
            else:
                groups = None
                artifacts = self.sink.build(records)
        except EmptyResultError:
            logger.warning("No eligible surgery found in export.", filename=filename)
            raise
        except ConversionError as e:
            logger.error(f"Conversion failed: {e}", filename=filename, error_type=type(e).__name__)
            raise

        result = ConversionResult(records=records, groups=groups, artifacts=artifacts, filename=filename)
        logger.info(
            "Conversion completed.",
            filename=filename,
            record_count=result.record_count,
            artifact_count=result.artifact_count,
        )
        return result
