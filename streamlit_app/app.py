"""Training Catalog: Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

import streamlit as st

from training_catalog.models.enums import ActivityType
from training_catalog.report import try_build_training_summary
from training_catalog.serialization import (
    activities_frame,
    content_breakdown,
    to_catalog_json_string,
)

from helpers import (
    LEVEL_COLORS,
    format_enrolled,
    format_hours,
    list_catalogs,
    load_training,
    parse_user_names,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Training Catalog",
    page_icon="📚",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Sidebar: catalog selection and enrollment
# ---------------------------------------------------------------------------

st.sidebar.title("Catálogo")
catalog_name = st.sidebar.selectbox("Formação", list_catalogs())

# The training lives in session state so enrollments survive reruns
if st.session_state.get("catalog_name") != catalog_name:
    st.session_state["catalog_name"] = catalog_name
    st.session_state["training"] = load_training(catalog_name)
training = st.session_state["training"]

with st.sidebar.form("enroll_form", clear_on_submit=True):
    raw_names = st.text_area("Matricular (nomes separados por vírgula)")
    if st.form_submit_button("Matricular"):
        users = parse_user_names(raw_names)
        training.enroll(users)
        st.success(f"{len(users)} pessoa(s) matriculada(s)")

# ---------------------------------------------------------------------------
# Header metrics
# ---------------------------------------------------------------------------

st.title(training.name)
st.caption(training.description)

result = try_build_training_summary(training)
if not result.ok:
    st.error(f"Não foi possível gerar o resumo: {result.error}")
    st.stop()

level = training.training_level()
col1, col2, col3 = st.columns(3)
col1.markdown(
    f'<div style="background:{LEVEL_COLORS.get(level, "#CCCCCC")};padding:6px 12px;'
    f'border-radius:4px;">Nível: <strong>{level.level_name}</strong></div>',
    unsafe_allow_html=True,
)
col2.metric("Duração", format_hours(training.training_duration()))
col3.metric("Matrículas", format_enrolled(training))

st.write(
    f"{training.number_of_training_activities_by_type(ActivityType.COURSE)} cursos · "
    f"{training.number_of_training_activities_by_type(ActivityType.PROJECT_CHALLENGE)} desafios de projeto · "
    f"{training.number_of_training_activities_by_type(ActivityType.CODE_CHALLENGE)} desafio de código"
)

# ---------------------------------------------------------------------------
# Tabs
# ---------------------------------------------------------------------------

tab_summary, tab_contents, tab_activities = st.tabs(["Resumo", "Conteúdos", "Atividades"])

with tab_summary:
    st.code(result.report, language=None)
    st.download_button(
        "Baixar catálogo (JSON)",
        data=to_catalog_json_string(training),
        file_name="catalog.json",
        mime="application/json",
    )

with tab_contents:
    st.dataframe(content_breakdown(training), hide_index=True)

with tab_activities:
    st.dataframe(activities_frame(training), hide_index=True)
