import os
from datetime import date

import streamlit as st

from brief_gate.core import service
from brief_gate.core.bootstrap import ensure_data_dirs
from brief_gate.core.errors import DocumentReadError, NoExtractableContent
from brief_gate.export.exporter_txt import format_value, iter_fields, render_txt

SHOW_DEBUG = os.getenv("SHOW_DEBUG", "0") == "1"

# MUST be first Streamlit call
st.set_page_config(
    page_title="Brand Studio CREATE - Briefing Analysis",
    layout="wide",
    initial_sidebar_state="expanded",
)

ensure_data_dirs()

# ---------- CSS ----------
st.markdown(
    """
<style>
.block-container { padding-top: 1.0rem; max-width: 1150px; }
.decision-banner { padding: 18px 22px; border-radius: 16px; margin: 8px 0 18px 0; }
.decision-banner.go { background: rgba(22,163,74,0.18); border: 1px solid rgba(22,163,74,0.55); }
.decision-banner.conditional { background: rgba(234,179,8,0.16); border: 1px solid rgba(234,179,8,0.55); }
.decision-banner.nogo { background: rgba(220,38,38,0.16); border: 1px solid rgba(220,38,38,0.55); }
.decision-banner h2 { margin: 0 0 4px 0; }
</style>
""",
    unsafe_allow_html=True,
)

BANNER_TEXT = {
    "GO": ("go", "GO - Brief Approved", "All CREATE criteria met. This briefing is approved for processing."),
    "CONDITIONAL": ("conditional", "CONDITIONAL - Review Required", "Core criteria met but additional information needed."),
    "NO-GO": ("nogo", "NO-GO - Brief Rejected", "CREATE criteria not met. See evaluation details below."),
}

# ---------- Sidebar ----------
with st.sidebar:
    st.header("Briefing")
    reference_date = st.date_input("Reference date", value=date.today())
    uploaded = st.file_uploader("Upload briefing PDF", type=["pdf"])
    if st.button("Reset"):
        for k in ("payload", "payload_key"):
            st.session_state.pop(k, None)
        st.rerun()

st.title("Briefing Analysis")

# ---------- Processing ----------
if uploaded is not None:
    key = (uploaded.name, uploaded.size, reference_date.isoformat())
    if st.session_state.get("payload_key") != key:
        with st.spinner("Reading PDF and evaluating CREATE criteria..."):
            try:
                st.session_state["payload"] = service.analyze_pdf(
                    uploaded.getvalue(), uploaded.name, reference_date
                )
                st.session_state["payload_key"] = key
            except (DocumentReadError, NoExtractableContent) as e:
                st.session_state.pop("payload", None)
                st.error(f"Failed to process PDF: {e}")

payload = st.session_state.get("payload")
if not payload:
    st.info("Upload a briefing PDF to get a GO / NO-GO decision.")
    st.stop()

decision = payload["decision"]
briefing = payload["briefing"]

# ---------- Decision banner ----------
css, title, message = BANNER_TEXT.get(decision["status"], BANNER_TEXT["NO-GO"])
st.markdown(
    f'<div class="decision-banner {css}"><h2>{title}</h2>'
    f'<div>{message}</div><b>Score: {decision["score"]}/{decision["max_score"]}</b></div>',
    unsafe_allow_html=True,
)

# ---------- Criteria ----------
cols = st.columns(3)
for col, (name, c) in zip(cols, decision["criteria"].items()):
    with col:
        st.metric(name.replace("_", " ").title(), f'{c["score"]}/{c["max_score"]}', c["status"])
        st.caption(c["message"])

if decision["issues"]:
    st.subheader("Issues")
    for issue in decision["issues"]:
        st.markdown(f"- {issue}")

if decision["recommendations"]:
    st.subheader("Recommendations")
    for rec in decision["recommendations"]:
        st.markdown(f"- {rec}")

# ---------- Extracted data ----------
st.subheader("Extracted data")
st.table([{"Field": label, "Value": format_value(value)} for label, value in iter_fields(briefing)])

# ---------- Downloads ----------
rid = service.result_id(payload)
d1, d2, d3 = st.columns(3)
with d1:
    st.download_button("Download JSON", service.to_json(payload), file_name=f"brief_{rid}.json", mime="application/json")
with d2:
    st.download_button("Download TXT", render_txt(payload), file_name=f"brief_{rid}.txt", mime="text/plain")
with d3:
    if st.button("Export DOCX"):
        out = service.export(payload, fmt="docx")
        with open(out["path"], "rb") as f:
            st.download_button(
                "Download DOCX",
                f.read(),
                file_name=os.path.basename(out["path"]),
                mime="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            )

if SHOW_DEBUG:
    st.json(payload)
