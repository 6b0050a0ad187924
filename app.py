# app.py
import logging

import streamlit as st

from algorithms.errors import DnaMatchError
from algorithms.modes import Mode, run
from config import load_settings
from utils.highlight import highlight_matches_html
from utils.text_io import parse_sequence, read_files_as_sequences

settings = load_settings()
logging.basicConfig(level=settings.log_level)

LABELS = {
    Mode.BRUTE_FORCE: "Brute force (exact count)",
    Mode.KARP_RABIN: "Karp-Rabin (exact count)",
    Mode.LCSS: "Longest common subsequence (distance)",
}

st.set_page_config(page_title="DNA Pattern Matching", layout="wide")
st.title("DNA Pattern Matching")

mode = st.radio("Algorithm", list(LABELS), format_func=LABELS.get, horizontal=True)
second = "Pattern" if mode.exact else "Second sequence"

col_a, col_b = st.columns(2)
with col_a:
    text_a = st.text_area("DNA sequence", height=200)
with col_b:
    text_b = st.text_area(second, height=200)

uploads = st.file_uploader(
    "...or upload two files (sequence first)", type=["txt", "seq"], accept_multiple_files=True
)

if st.button("Run"):
    try:
        if uploads:
            seqs, names = read_files_as_sequences(uploads)
            if len(seqs) != 2:
                st.error("Upload exactly two files.")
                st.stop()
            subject, other = seqs
            st.caption(f"{names[0]} vs {names[1]}")
        else:
            subject = parse_sequence(text_a, name="DNA sequence")
            other = parse_sequence(text_b, name=second)
        result = run(mode, subject, other, hash_mod=settings.hash_mod,
                     max_cells=settings.max_table_cells)
    except DnaMatchError as e:
        st.error(str(e))
        st.stop()

    if mode.exact:
        st.metric("Occurrences", result.occurrences)
        st.markdown(
            highlight_matches_html(subject, result.positions, len(other)),
            unsafe_allow_html=True,
        )
    else:
        c1, c2 = st.columns(2)
        c1.metric("LCSS length", result.lcss_length)
        c2.metric("Distance", f"{result.distance:.2f}")
