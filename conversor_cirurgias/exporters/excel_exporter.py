"""
Módulo de exportação Excel das cirurgias.
Gera uma planilha por grupo (arquivo completo ou mês), sempre com as mesmas sete colunas.
"""
from dataclasses import dataclass
from io import BytesIO
from typing import Dict, List, Sequence

import pandas as pd

from conversor_cirurgias.common.models import COLUMNS, SurgeryRecord

XLSX_MEDIA_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


@dataclass(frozen=True)
class Artifact:
    """Uma planilha pronta para download ou gravação em disco."""
    filename: str
    content: bytes
    record_count: int


class ExcelRecordSink:
    """Escreve grupos de cirurgias em arquivos .xlsx."""

    SHEET_NAME = 'Cirurgias'
    FILENAME = 'cirurgias.xlsx'
    MONTHLY_FILENAME = 'cirurgias_{key}.xlsx'

    COLORS = {
        'header_bg': '#1e293b',
        'header_text': '#ffffff',
        'border': '#e2e8f0',
    }

    # Largura por coluna, na ordem de COLUMNS
    COLUMN_WIDTHS = [16, 16, 60, 16, 40, 40, 18]

    def build(self, records: Sequence[SurgeryRecord]) -> List[Artifact]:
        """
        Variante sem agrupamento: um único arquivo, ou nenhum se não houver registros.
        """
        if not records:
            return []
        return [Artifact(self.FILENAME, self._render(records), len(records))]

    def build_monthly(self, groups: Dict[str, Sequence[SurgeryRecord]]) -> List[Artifact]:
        """
        Variante mensal: um arquivo por mês não vazio, na ordem das chaves.
        """
        artifacts = []
        for key, records in groups.items():
            if not records:
                continue
            filename = self.MONTHLY_FILENAME.format(key=key)
            artifacts.append(Artifact(filename, self._render(records), len(records)))
        return artifacts

    def to_dataframe(self, records: Sequence[SurgeryRecord]) -> pd.DataFrame:
        """Linhas com os rótulos de cabeçalho, colunas sempre na ordem fixa."""
        return pd.DataFrame([r.to_row() for r in records], columns=COLUMNS, dtype=str)

    def _render(self, records: Sequence[SurgeryRecord]) -> bytes:
        buffer = BytesIO()
        df = self.to_dataframe(records)

        with pd.ExcelWriter(buffer, engine='xlsxwriter') as writer:
            df.to_excel(writer, index=False, sheet_name=self.SHEET_NAME)

            workbook = writer.book
            sheet = writer.sheets[self.SHEET_NAME]

            header_format = workbook.add_format({
                'bold': True,
                'font_color': self.COLORS['header_text'],
                'bg_color': self.COLORS['header_bg'],
                'border': 1,
                'align': 'center',
                'valign': 'vcenter',
                'font_size': 11,
            })
            cell_format = workbook.add_format({
                'border': 1,
                'border_color': self.COLORS['border'],
                'valign': 'vcenter',
            })

            # Reescreve o cabeçalho com a formatação da casa
            for col, header in enumerate(COLUMNS):
                sheet.write(0, col, header, header_format)
                sheet.set_column(col, col, self.COLUMN_WIDTHS[col], cell_format)

            # Congelar primeira linha
            sheet.freeze_panes(1, 0)
            if len(df) > 0:
                sheet.autofilter(0, 0, len(df), len(COLUMNS) - 1)

        return buffer.getvalue()
