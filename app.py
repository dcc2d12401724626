import streamlit as st
from conversor_cirurgias.common.logging_config import setup_logging
from conversor_cirurgias.common.settings import get_settings
from conversor_cirurgias.ui.converter_app import render_converter_view

# --- CONFIG ---
st.set_page_config(page_title="Conversor de Cirurgias", layout="wide", page_icon="🏥")

if 'logging_ready' not in st.session_state:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    st.session_state.logging_ready = True

# --- HEADER ---
st.title("🏥 Conversor de Cirurgias")
st.markdown("Relatório de cirurgias do sistema hospitalar (XML) para planilhas Excel")

render_converter_view()
