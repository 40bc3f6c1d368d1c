# app.py: paste a lead, get a full Project Folder

import streamlit as st

from leadfolder.backend_client import BackendClient
from leadfolder.clipboard import BrowserClipboard
from leadfolder.config import Settings, configure_logging
from leadfolder.content_guidelines import MODEL_OPTIONS, TONE_PRESETS
from leadfolder.errors import ClipboardPending
from leadfolder.exports import EXPORT_FORMATS, copy_output, export_document, section_view
from leadfolder.history_store import HistoryStore, JsonFileStore
from leadfolder.pipeline import GenerationPipeline
from leadfolder.sections import SECTION_KEYS, SECTION_LABELS
from leadfolder.state import SessionState

# -----------------------------------------------------------------------------
# Env & defaults
# -----------------------------------------------------------------------------
settings = Settings.from_env()
configure_logging(settings.LOG_LEVEL)

LEAD_PLACEHOLDER = """Lead Name: Claire Meyer
Email: claire@brightscale.studio
Source: Referral – Existing Client
Project Type: SaaS Web App + AI Automation
Budget: €4,000 – €7,000
Timeline: 4–6 weeks
Notes: I run a small web design & no-code studio and we lose a lot of time writing proposals, project briefs and mini-specs..."""

# ---------------- Page config ----------------
st.set_page_config(page_title="AI Proposal Workspace", layout="wide")

# ---------------- Minimal CSS ----------------
st.markdown("""
<style>
    .stTextArea textarea {
        font-size: 14px;
        font-family: ui-monospace, SFMono-Regular, Menlo, monospace;
    }
    [data-testid="stSidebar"] .stButton button {
        text-align: left;
        justify-content: flex-start;
    }
    .history-meta {
        font-size: 11px;
        color: #64748b;
        margin: -6px 0 8px 2px;
    }
</style>
""", unsafe_allow_html=True)


# ---------------- Shared resources ----------------
@st.cache_resource
def get_history_store() -> HistoryStore:
    store = HistoryStore(
        JsonFileStore(settings.HISTORY_PATH),
        key=settings.HISTORY_KEY,
        limit=settings.HISTORY_LIMIT,
    )
    store.load()
    return store


@st.cache_resource
def get_backend_client() -> BackendClient:
    return BackendClient(settings.BACKEND_URL, timeout=settings.backend_timeout)


# ---------------- Session state ----------------
def init_state():
    ss = st.session_state
    ss.setdefault("workspace", SessionState())
    ws = ss["workspace"]
    ss.setdefault("lead_input", ws.lead_text)
    ss.setdefault("model_input", ws.model)
    ss.setdefault("tone_input", ws.tone)
    ss.setdefault("export_fmt", EXPORT_FORMATS[0])
    ss.setdefault("copy_nonce", 0)
    ss.setdefault("copy_pending", False)
init_state()
ss = st.session_state
ws: SessionState = ss["workspace"]
history = get_history_store()


def _sync_widgets_from_workspace():
    ss["lead_input"] = ws.lead_text
    ss["model_input"] = ws.model if ws.model in MODEL_OPTIONS else next(iter(MODEL_OPTIONS))
    ss["tone_input"] = ws.tone if ws.tone in TONE_PRESETS else next(iter(TONE_PRESETS))


def on_new_project():
    ws.new_project()
    _sync_widgets_from_workspace()


def on_select_history(item_id: str):
    item = history.get(item_id)
    if item is None:
        return
    ws.select_history(item)
    _sync_widgets_from_workspace()


def on_copy():
    # New component key per click so the browser runs the write again.
    ss["copy_nonce"] += 1
    ss["copy_pending"] = True


def run_pending_copy():
    """Drive the clipboard component until the browser reports back."""
    if not ss["copy_pending"]:
        return
    try:
        copy_output(ws, BrowserClipboard(key=f"clipboard_{ss['copy_nonce']}"))
    except ClipboardPending:
        return
    ss["copy_pending"] = False


def render_copy_notice():
    notice = ws.copy_notice.current()
    if notice:
        st.caption(notice)


def _time_label(item) -> str:
    try:
        return item.created_at.astimezone().strftime("%H:%M")
    except (ValueError, OSError):
        return ""


# =============================================================================
# SIDEBAR
# =============================================================================
with st.sidebar:
    st.markdown("### Studio")
    st.caption("AI Proposal Workspace")

    st.button("＋ New project", on_click=on_new_project, use_container_width=True)

    st.markdown("**Recent runs**")
    items = history.items
    if not items:
        st.caption("No history yet. Generate a project to see it here.")
    for item in items:
        marker = "▸ " if item.id == ws.active_history_id else ""
        st.button(
            f"{marker}{item.title}",
            key=f"hist_{item.id}",
            on_click=on_select_history,
            args=(item.id,),
            use_container_width=True,
        )
        st.markdown(
            f"<div class='history-meta'>{_time_label(item)} · {item.model} · {item.tone}</div>",
            unsafe_allow_html=True,
        )

    st.markdown("**Settings**")
    st.selectbox(
        "Model",
        options=list(MODEL_OPTIONS),
        format_func=lambda m: MODEL_OPTIONS[m],
        key="model_input",
    )
    st.selectbox(
        "Tone preset",
        options=list(TONE_PRESETS),
        format_func=lambda t: TONE_PRESETS[t]["label"],
        key="tone_input",
    )

ws.model = ss["model_input"]
ws.tone = ss["tone_input"]

# =============================================================================
# MAIN
# =============================================================================
st.title("AI Proposal & Brief Generator")
st.caption(
    "Paste a raw lead block and generate a full, client-ready Project Folder: "
    "overview, brief, proposal and mini-spec in one go."
)

col_in, col_out = st.columns([1, 1.4])

with col_in:
    st.subheader("1. Raw lead input")
    st.caption("Paste the client info exactly as you receive it (email, Notion, form, notes…).")
    st.text_area(
        "Lead",
        key="lead_input",
        height=380,
        placeholder=LEAD_PLACEHOLDER,
        label_visibility="collapsed",
    )
    ws.lead_text = ss["lead_input"]

    if st.button("⚡ Generate Project Folder", type="primary",
                 disabled=ws.is_loading, use_container_width=True):
        pipeline = GenerationPipeline(ws, history, get_backend_client())
        with st.spinner("Generating…"):
            pipeline.generate(ws.lead_text, ws.model, ws.tone)
        st.rerun()

with col_out:
    st.subheader("2. Generated project folder")
    has_output = bool(ws.output_text.strip())

    c_copy, c_fmt, c_dl = st.columns([1, 1, 1])
    with c_copy:
        st.button("📋 Copy", key="copy_btn", on_click=on_copy,
                  disabled=not has_output or ws.is_loading, use_container_width=True)
        run_pending_copy()
    with c_fmt:
        st.selectbox("Format", EXPORT_FORMATS, key="export_fmt", label_visibility="collapsed")
    with c_dl:
        export = export_document(ws.output_text, ss["export_fmt"])
        st.download_button(
            "📥 Download",
            data=export.data if export else b"",
            file_name=export.file_name if export else "project-folder.md",
            mime=export.mime if export else "text/markdown",
            disabled=export is None or ws.is_loading,
            use_container_width=True,
        )

    # Polls on its own while a notice is up so it clears without user input.
    st.fragment(render_copy_notice, run_every=ws.copy_notice.poll_interval())()
    if ws.error_text:
        st.error(ws.error_text)

    tab = st.radio(
        "Section",
        options=list(SECTION_KEYS),
        index=SECTION_KEYS.index(ws.active_tab) if ws.active_tab in SECTION_KEYS else 0,
        format_func=lambda k: SECTION_LABELS[k],
        horizontal=True,
        label_visibility="collapsed",
    )
    ws.active_tab = tab

    with st.container(height=560, border=True):
        if has_output:
            st.markdown(section_view(ws.output_text, ws.active_tab))
        else:
            st.info("Your Project Folder will appear here.")

    if ws.active_history_id:
        active = history.get(ws.active_history_id)
        if active is not None:
            st.caption(f"Saved {active.created_at.astimezone().strftime('%Y-%m-%d %H:%M')} · {active.title}")
