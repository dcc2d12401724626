"""
Surgery Extractor

Walks the export tree and turns every surgery found under the
date -> patient -> surgery list -> surgery grouping into a flat record.
"""
import sys
from typing import List

from conversor_cirurgias.common.models import SurgeryRecord
from .config.layout import ExportLayout, DEFAULT_LAYOUT
from .exceptions import ParseError, StructuralMismatchError
from .tree import Node, find_descendants, find_first_descendant, find_first_descendant_text


class SurgeryExtractor:
    """
    Extracts SurgeryRecords from a parsed export.

    Groups are matched by tag name at any depth, so the varying nesting of
    the report does not matter. Surgeries with the excluded anesthesia type
    (LOCAL by default) are skipped.
    """

    def __init__(self, layout: ExportLayout = DEFAULT_LAYOUT, filename: str = None):
        self.layout = layout
        self.filename = filename

    def extract(self, root: Node) -> List[SurgeryRecord]:
        """
        Returns the records in document order.

        Raises:
            StructuralMismatchError: A patient group has no surgery list group.
            ParseError: The document is nested deeper than the visitor can follow.
        """
        records: List[SurgeryRecord] = []
        try:
            self._visit(root, records)
        except RecursionError as e:
            raise ParseError(
                f"aninhamento excede a profundidade máxima suportada ({sys.getrecursionlimit()} níveis)",
                filename=self.filename,
            ) from e
        return records

    def _visit(self, node: Node, records: List[SurgeryRecord]) -> None:
        if node.tag == self.layout.date_group:
            records.extend(self._extract_date_group(node))

        for child in node.children:
            self._visit(child, records)

    def _extract_date_group(self, date_group: Node) -> List[SurgeryRecord]:
        layout = self.layout
        date = find_first_descendant_text(date_group, layout.date)

        records = []
        for patient in find_descendants(date_group, layout.patient_group):
            notice_id = find_first_descendant_text(patient, layout.notice_id)
            patient_code = find_first_descendant_text(patient, layout.patient_code)
            patient_name = find_first_descendant_text(patient, layout.patient_name)

            surgery_list = find_first_descendant(patient, layout.surgery_list_group)
            if surgery_list is None:
                raise StructuralMismatchError(
                    missing_tag=layout.surgery_list_group,
                    parent_tag=layout.patient_group,
                    context=f"data {date or '?'}, aviso {notice_id or '?'}",
                    filename=self.filename,
                )

            for surgery in find_descendants(surgery_list, layout.surgery_group):
                anesthesia_type = find_first_descendant_text(surgery, layout.anesthesia_type)
                if anesthesia_type == layout.excluded_anesthesia_type:
                    continue

                records.append(SurgeryRecord(
                    realization_date=date,
                    notice_id=notice_id,
                    surgery_description=find_first_descendant_text(surgery, layout.surgery_description),
                    patient_code=patient_code,
                    patient_name=patient_name,
                    anesthesiologist=find_first_descendant_text(surgery, layout.anesthesiologist),
                    anesthesia_type=anesthesia_type,
                ))
        return records
