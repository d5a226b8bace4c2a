from __future__ import annotations

import logging
import tempfile
from pathlib import Path

import streamlit as st

from legal_text_simplifier.analysis import compare_readability, suggest_simplifications
from legal_text_simplifier.config import get_settings
from legal_text_simplifier.documents import SUPPORTED_SUFFIXES, extract_text
from legal_text_simplifier.errors import SimplifierError
from legal_text_simplifier.pipeline import SimplificationOptions, simplify_legal_text


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

st.set_page_config(page_title="Legal Text Simplifier", layout="wide")

st.title("Legal Text Simplifier")
st.write("Rewrites legal language in plain English. Optional OpenAI / Hugging Face / Gemini refinement.")

settings = get_settings()

with st.sidebar:
    st.header("Options")
    method = st.selectbox("Method", ["hybrid", "basic", "ai"], index=0)
    ai_provider = st.selectbox("AI provider (ai method)", ["openai", "huggingface", "gemini"], index=0)
    preserve_structure = st.checkbox("Preserve document structure", value=True)

    st.divider()
    st.subheader("Upload")
    ocr_fallback = st.checkbox("Use OCR fallback for scanned PDFs (slower)", value=False)

    st.divider()
    st.subheader("Configured providers")
    st.write(
        {
            "openai": bool(settings.openai_api_key),
            "huggingface": bool(settings.huggingface_api_key),
            "gemini": bool(settings.gemini_api_key),
        }
    )

upload = st.file_uploader(
    "Upload a document (optional)",
    type=sorted(s.lstrip(".") for s in SUPPORTED_SUFFIXES),
)

initial_text = ""
if upload is not None:
    with tempfile.TemporaryDirectory() as tmp:
        in_path = Path(tmp) / upload.name
        in_path.write_bytes(upload.getvalue())
        try:
            doc = extract_text(in_path, ocr_fallback=ocr_fallback)
        except SimplifierError as e:
            st.error(str(e))
            st.stop()
    initial_text = doc.text
    st.caption(f"Extracted {doc.word_count} words from {doc.source_type.upper()}" + (" (OCR)" if doc.used_ocr else ""))

text = st.text_area("Legal text", initial_text, height=260)

run = st.button("Simplify")

if not run:
    st.stop()

opts = SimplificationOptions(method=method, ai_provider=ai_provider, preserve_structure=preserve_structure)

with st.status("Simplifying…", expanded=False) as status:
    try:
        result = simplify_legal_text(text, opts, settings=settings)
    except SimplifierError as e:
        status.update(label="Failed", state="error")
        st.error(str(e))
        st.stop()
    status.update(label="Done", state="complete")

col1, col2 = st.columns(2)

with col1:
    st.subheader("Simplified")
    st.text_area("Output", result.simplified_text, height=260)
    caption = f"Method: {result.method}"
    if result.provider:
        caption += f" ({result.provider})"
    st.caption(caption)

    st.download_button(
        "Download simplified text",
        data=result.simplified_text.encode("utf-8"),
        file_name="simplified.txt",
    )

with col2:
    st.subheader("Metrics")
    c1, c2 = st.columns(2)
    with c1:
        st.metric("Word count reduction", f"{result.word_count_reduction}%")
    with c2:
        st.metric("Readability (Flesch)", result.readability_score)

    metrics = compare_readability(result.original_text, result.simplified_text)
    st.caption("Readability (original vs simplified)")
    st.dataframe(
        [
            {
                "text": name,
                "score": m["score"],
                "grade": round(m["flesch_kincaid_grade"], 1),
                "words": m["words"],
                "sentences": m["sentences"],
            }
            for name, m in metrics.items()
        ],
        use_container_width=True,
    )

    st.subheader("Suggestions")
    suggestions = suggest_simplifications(result.original_text)
    if not suggestions:
        st.write("No further suggestions.")
    for s in suggestions:
        st.write(f"- **{s['type']}**: {s['description']}")
