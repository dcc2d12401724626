import streamlit as st
import pandas as pd
from conversor_cirurgias.common.logging_config import get_logger
from conversor_cirurgias.common.models import COLUMNS
from conversor_cirurgias.common.settings import get_settings
from conversor_cirurgias.exporters.excel_exporter import XLSX_MEDIA_TYPE
from conversor_cirurgias.parsing.config.layout import load_layout
from conversor_cirurgias.parsing.exceptions import ConversionError, EmptyResultError
from conversor_cirurgias.parsing.pipeline import ConversionPipeline

logger = get_logger(__name__)


def render_converter_view():
    st.header("📄 XML para Excel")

    uploaded_file = st.file_uploader("Upload XML", type=["xml"], key="xml_uploader")
    monthly = st.toggle("Separar por mês", value=True, key="monthly_toggle")

    if uploaded_file is None:
        st.session_state.pop('conversion_result', None)

    if uploaded_file and st.button("Converter para Excel", key="convert_btn", type="primary"):
        pipeline = ConversionPipeline(load_layout(get_settings().layout_file))

        try:
            with st.spinner(f"Processando {uploaded_file.name}..."):
                result = pipeline.run(uploaded_file.getvalue(), filename=uploaded_file.name, monthly=monthly)
        except EmptyResultError:
            st.session_state.pop('conversion_result', None)
            st.warning("Nenhum dado valido encontrado no arquivo XML.")
            return
        except ConversionError as e:
            st.session_state.pop('conversion_result', None)
            st.error(f"Erro ao processar o arquivo: {e}")
            return

        st.session_state['conversion_result'] = result

    result = st.session_state.get('conversion_result')
    if result is None:
        return

    st.success(f"✅ {result.summary_message()}")

    if result.groups:
        months_df = pd.DataFrame(
            [{"Mês": key, "Registros": count} for key, count in result.month_counts().items()]
        )
        st.dataframe(months_df, use_container_width=True, hide_index=True)

    df_preview = pd.DataFrame([r.to_row() for r in result.records], columns=COLUMNS)
    st.dataframe(df_preview.head(50), use_container_width=True, hide_index=True)

    cols = st.columns(min(len(result.artifacts), 4))
    for i, artifact in enumerate(result.artifacts):
        with cols[i % len(cols)]:
            st.download_button(
                label=f"⬇️ {artifact.filename} ({artifact.record_count})",
                data=artifact.content,
                file_name=artifact.filename,
                mime=XLSX_MEDIA_TYPE,
                key=f"download_{artifact.filename}",
            )
