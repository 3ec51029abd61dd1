"""
Generate Block page - progress a client's last block or start from a template
"""

import streamlit as st

from program_builder.block_generator import MODE_PROGRESS, MODE_TEMPLATE, BlockRequest, generate_next_block
from program_builder.models import DifficultyRating, EnjoymentRating
from program_builder.templates import available_styles, template_to_text


MODE_LABELS = {
    MODE_TEMPLATE: "Start from Template",
    MODE_PROGRESS: "Progress Previous Block",
}

ENJOYMENT_LABELS = {
    EnjoymentRating.LOVED.value: "Loved",
    EnjoymentRating.NEUTRAL.value: "Neutral",
    EnjoymentRating.DISLIKED.value: "Disliked",
}

FORM_KEYS = (
    "client",
    "style",
    "mode",
    "previous_block",
    "difficulty",
    "enjoyment",
    "disliked",
    "injuries",
    "notes",
)

FOOTER = (
    "v1 progression: +5% load or +1 rep / +1 set if easy; hold or -5% load if hard; "
    "swap disliked/risky lifts for close variations."
)


def previous_block_placeholder(mode):
    if mode == MODE_TEMPLATE:
        return 'Click "Load default week" or type your own skeleton...'
    return "Paste the client's last block here..."


def should_generate_block(clicked, in_progress, style=None):
    """Start a generate pass only on a fresh click with a known style."""
    if not clicked or in_progress:
        return False
    if style is not None and style not in available_styles():
        return False
    return True


def should_update_previous_block(mode, previous_block, source_text):
    """True when a template-mode run was seeded from the catalog and the text box is empty."""
    if mode != MODE_TEMPLATE:
        return False
    if (previous_block or "").strip():
        return False
    return bool(source_text)


def form_from_state(state):
    return {key: state.get(key) for key in FORM_KEYS}


def build_request(form):
    """Build a BlockRequest from the page's widget values."""
    return BlockRequest(
        client=(form.get("client") or "").strip(),
        style=form.get("style") or available_styles()[0],
        mode=form.get("mode") or MODE_TEMPLATE,
        previous_block=form.get("previous_block") or "",
        difficulty=form.get("difficulty") or DifficultyRating.JUST_RIGHT.value,
        enjoyment=form.get("enjoyment") or EnjoymentRating.NEUTRAL.value,
        disliked=form.get("disliked") or "",
        injuries=form.get("injuries") or "",
        notes=form.get("notes") or "",
    )


def _load_default_week():
    st.session_state.previous_block = template_to_text(st.session_state.style)


def _request_generation():
    st.session_state.generate_requested = True


def _run_generation():
    """Generate from the widget values kept in session state, before widgets are drawn."""
    st.session_state.plan_generation_in_progress = True
    try:
        request = build_request(form_from_state(st.session_state))
        result = generate_next_block(request)
        st.session_state.plan_output = result.text
        st.session_state.plan_filename = result.filename
        if should_update_previous_block(request.mode, request.previous_block, result.source_text):
            st.session_state.previous_block = result.source_text
    finally:
        st.session_state.plan_generation_in_progress = False


def show():
    """Render the generate block page"""

    st.markdown("## 🏋️ Coach's Program Builder")

    if "previous_block" not in st.session_state:
        st.session_state.previous_block = ""
    if "plan_output" not in st.session_state:
        st.session_state.plan_output = ""
    if "plan_generation_in_progress" not in st.session_state:
        st.session_state.plan_generation_in_progress = False

    if should_generate_block(
        st.session_state.pop("generate_requested", False),
        st.session_state.plan_generation_in_progress,
        st.session_state.get("style"),
    ):
        _run_generation()

    col1, col2 = st.columns(2)
    with col1:
        st.text_input("Client name", key="client", placeholder="e.g., Sarah K.")
    with col2:
        st.selectbox("Training style", available_styles(), key="style")

    mode = st.radio(
        "Mode",
        list(MODE_LABELS.keys()),
        key="mode",
        format_func=MODE_LABELS.get,
        horizontal=True,
    )

    left, right = st.columns(2)
    with left:
        st.markdown("#### " + ("Template" if mode == MODE_TEMPLATE else "Previous block"))
        if mode == MODE_TEMPLATE:
            st.button("Load default week", on_click=_load_default_week)
        st.text_area(
            "Block text",
            key="previous_block",
            height=280,
            placeholder=previous_block_placeholder(mode),
        )

        diff_col, enjoy_col = st.columns(2)
        with diff_col:
            st.radio(
                "Difficulty",
                [rating.value for rating in DifficultyRating],
                key="difficulty",
                index=1,
                horizontal=True,
            )
        with enjoy_col:
            st.radio(
                "Enjoyment",
                list(ENJOYMENT_LABELS.keys()),
                key="enjoyment",
                index=1,
                format_func=ENJOYMENT_LABELS.get,
                horizontal=True,
            )

        st.text_area("Disliked exercises (comma/line separated)", key="disliked", placeholder="e.g., lunges, back squat")
        st.text_area("Injuries / niggles", key="injuries", placeholder="e.g., knee pain, low back tightness")
        st.text_area("Coach notes", key="notes", placeholder="Any extra context for this block...")

        st.button(
            "Generate Next Block",
            type="primary",
            disabled=st.session_state.plan_generation_in_progress,
            on_click=_request_generation,
        )

    with right:
        st.markdown("#### Suggested next block")
        output = st.session_state.plan_output
        if output:
            # st.code carries a copy-to-clipboard button.
            st.code(output, language=None)
            st.download_button(
                "Download .txt",
                data=output,
                file_name=st.session_state.get("plan_filename", "next_block.txt"),
                mime="text/plain",
            )
        else:
            st.info("Your plan will appear here after you click Generate.")

    st.caption(FOOTER)
