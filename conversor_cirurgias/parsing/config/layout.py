"""
Export Layout Configuration

Tag names of the hospital system's surgery report export.
"""
import json
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class ExportLayout:
    """
    Tag names used to locate the structural groups and leaf fields.

    Attributes:
        date_group: Container for all surgeries performed on one date
        date: Realization date leaf (DD/MM/YY)
        patient_group: Container for one patient and their surgeries
        notice_id: Surgical notice leaf
        patient_code: Patient code leaf
        patient_name: Patient name leaf
        surgery_list_group: Container of the patient's surgery groups
        surgery_group: One surgery
        surgery_description: Procedure description leaf
        anesthesiologist: Anesthesiologist name leaf
        anesthesia_type: Anesthesia type leaf
        excluded_anesthesia_type: Anesthesia type whose surgeries are dropped
    """
    date_group: str = "G_DT_REALIZACAO"
    date: str = "DT_REALIZACAO"
    patient_group: str = "G_NM_PACIENTE"
    notice_id: str = "CD_AVISO_CIRURGIA"
    patient_code: str = "CD_PACIENTE"
    patient_name: str = "NM_PACIENTE"
    surgery_list_group: str = "LIST_G_CIRURGIA"
    surgery_group: str = "G_CIRURGIA"
    surgery_description: str = "DECODE_NVL_CIR_AVI_DS_NPADRONI"
    anesthesiologist: str = "CF_NM_ANESTESISTA"
    anesthesia_type: str = "DS_TIP_ANEST"
    excluded_anesthesia_type: str = "LOCAL"

    @classmethod
    def from_dict(cls, data: dict) -> "ExportLayout":
        """Builds a layout from a partial dict; missing keys keep their defaults."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Chaves de layout desconhecidas: {', '.join(unknown)}")
        for key, value in data.items():
            if not isinstance(value, str) or not value:
                raise ValueError(f"Valor inválido para '{key}': {value!r}")
        return cls(**data)


DEFAULT_LAYOUT = ExportLayout()


def load_layout(path: str = None) -> ExportLayout:
    """
    Loads a layout override from a JSON file.

    Args:
        path: JSON file path; None returns the default layout
    """
    if not path:
        return DEFAULT_LAYOUT
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Layout em {path} deve ser um objeto JSON.")
    return ExportLayout.from_dict(data)
