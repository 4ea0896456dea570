"""Streamlit front end for DOI/PMID lookups.

Run with ``streamlit run pubmed_lookup/apps/explorer.py``.
"""

from __future__ import annotations

import html
import json

import streamlit as st
import streamlit.components.v1 as components

from pubmed_lookup.api import PaperLookupClient
from pubmed_lookup.core.formatting import format_copy_payload
from pubmed_lookup.core.models import PaperRecord
from pubmed_lookup.core.session import LookupSession, LookupState
from pubmed_lookup.core.settings import LookupSettings

EXAMPLE_DOI = "doi:10.1016/j.neuron.2019.05.013"
EXAMPLE_PMID = "31174959"
COPY_ACK_MS = 2000


@st.cache_resource
def get_client() -> PaperLookupClient:
    return PaperLookupClient(LookupSettings())


def _get_session() -> LookupSession:
    if "lookup_session" not in st.session_state:
        st.session_state["lookup_session"] = LookupSession()
    return st.session_state["lookup_session"]


def build_copy_widget_html(payload: str, unique_key: str) -> str:
    """Return the HTML/JS snippet that shows ``payload`` with a copy button.

    A successful copy flips the button to a check mark and shows
    "Copied to clipboard!" for two seconds; a failure only marks the button.
    """

    fn_name = "copyPayload_" + "".join(ch if ch.isalnum() else "_" for ch in unique_key)
    payload_js = json.dumps(payload).replace("</", "<\\/")
    return f"""
    <style>
        body {{ margin: 0; font-family: sans-serif; }}
        .payload-row {{ display: flex; align-items: center; gap: 8px; }}
        .payload {{
            flex-grow: 1;
            background: #f0f2f6;
            padding: 8px;
            border-radius: 6px;
            font-size: 0.9em;
            user-select: all;
        }}
        .copy-btn {{ cursor: pointer; border-radius: 5px; padding: 4px 8px; }}
        .copy-ack {{ color: #198754; margin-top: 6px; visibility: hidden; }}
    </style>
    <div class="payload-row">
        <div class="payload" id="payload-{unique_key}">{html.escape(payload)}</div>
        <button class="copy-btn" id="btn-{unique_key}" onclick="{fn_name}()"
                title="Copy to clipboard">📋</button>
    </div>
    <div class="copy-ack" id="ack-{unique_key}">Copied to clipboard!</div>
    <script>
        async function {fn_name}() {{
            const btn = document.getElementById('btn-{unique_key}');
            const ack = document.getElementById('ack-{unique_key}');
            try {{
                await navigator.clipboard.writeText({payload_js});
                btn.textContent = '✅';
                ack.style.visibility = 'visible';
                setTimeout(() => {{
                    btn.textContent = '📋';
                    ack.style.visibility = 'hidden';
                }}, {COPY_ACK_MS});
            }} catch (e) {{
                console.error('Failed to copy: ', e);
                btn.textContent = '❌';
                setTimeout(() => btn.textContent = '📋', {COPY_ACK_MS});
            }}
        }}
    </script>
    """


def _render_record(record: PaperRecord) -> None:
    with st.container(border=True):
        st.markdown(f"**Authors:** {record.authors}")
        st.markdown(f"**Auth.:** {record.short_authors}")
        st.markdown(f"**Title:** {record.title}")
        st.markdown(f"**Journal entry:** {record.journal}")
        if record.doi_url:
            st.markdown(f"**DOI:** [{record.doi}]({record.doi_url})")
        else:
            st.markdown(f"**DOI:** {record.doi}")
        if record.pubmed_url:
            st.markdown(f"**PMID:** [{record.pmid}]({record.pubmed_url})")
        else:
            st.markdown(f"**PMID:** {record.pmid}")
        payload = format_copy_payload(record)
        components.html(build_copy_widget_html(payload, "record"), height=90)


def _render_state(state: LookupState) -> None:
    if state.error:
        st.error(state.error)
    if state.record is not None:
        _render_record(state.record)


def render_app() -> None:
    st.set_page_config(page_title="PubMed Lookup")
    st.title("PubMed Lookup")
    st.markdown(f"Example DOI: `{EXAMPLE_DOI}` · Example PMID: `{EXAMPLE_PMID}`")

    session = _get_session()

    # Enter inside the text input submits the form.
    with st.form("lookup_form"):
        text = st.text_input(
            "DOI or PMID",
            value=session.state.input_text,
            placeholder="Enter DOI or PMID",
        )
        submit = st.form_submit_button("Submit", type="primary")

    if submit:
        with st.spinner("Loading..."):
            get_client().run(text, session)

    _render_state(session.state)


if __name__ == "__main__":
    render_app()
