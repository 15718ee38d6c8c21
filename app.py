# app.py
import streamlit as st

from services.compare import InputTooLarge, compare_texts, max_input_units
from utils.highlight import highlight_matches_html
from utils.segment import UNITS
from utils.text_io import read_upload

st.set_page_config(page_title="Gestalt Similarity", layout="wide")
st.title("Gestalt similarity (Ratcliff/Obershelp)")
st.caption(f"Up to {max_input_units()} units per side. Texts are compared as-is, no case folding.")

unit = st.selectbox("Compare by", UNITS, index=0)

colA, colB = st.columns(2)
with colA:
    upA = st.file_uploader("File A (optional)", type=["txt", "md"], key="upA")
    textA = st.text_area("Text A", value=read_upload(upA), height=240)
with colB:
    upB = st.file_uploader("File B (optional)", type=["txt", "md"], key="upB")
    textB = st.text_area("Text B", value=read_upload(upB), height=240)

if st.button("Compare", type="primary"):
    try:
        res = compare_texts(textA, textB, unit=unit)
    except InputTooLarge as e:
        st.error(str(e))
        st.stop()

    m1, m2, m3 = st.columns(3)
    m1.metric("Similarity", f"{res['similarity']:.4f}")
    m2.metric("Matched units", res["matched"])
    m3.metric("Lengths (A / B)", f"{res['lengthA']} / {res['lengthB']}")

    hA, hB = st.columns(2)
    with hA:
        st.markdown(highlight_matches_html(textA, res["matchesA"]), unsafe_allow_html=True)
    with hB:
        st.markdown(highlight_matches_html(textB, res["matchesB"]), unsafe_allow_html=True)

# Run with: streamlit run app.py
