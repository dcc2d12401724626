from dataclasses import dataclass, fields
from typing import Dict, List

# Spreadsheet header label for each record field, in output column order.
COLUMN_LABELS = {
    'realization_date': 'Data Realização',
    'notice_id': 'Aviso Cirurgia',
    'surgery_description': 'Cirurgia',
    'patient_code': 'Código Paciente',
    'patient_name': 'Nome Paciente',
    'anesthesiologist': 'Anestesista',
    'anesthesia_type': 'Tipo Anestesia',
}

COLUMNS: List[str] = list(COLUMN_LABELS.values())


@dataclass(frozen=True)
class SurgeryRecord:
    """
    One surgery extracted from the hospital export.
    Every field is text; leaves missing from the export are empty strings.
    """
    realization_date: str = ""  # DD/MM/YY
    notice_id: str = ""
    surgery_description: str = ""
    patient_code: str = ""
    patient_name: str = ""
    anesthesiologist: str = ""
    anesthesia_type: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_row(self) -> Dict[str, str]:
        """Dict keyed by spreadsheet header labels, in column order."""
        return {label: getattr(self, name) for name, label in COLUMN_LABELS.items()}
