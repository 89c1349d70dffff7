import streamlit as st

from grid_adventure.renderer import GridRenderer, render_chat_html
from grid_adventure.state import State
from grid_adventure.step import submit, with_pending_input

COMMAND_INPUT_KEY = "command_input"


def _on_submit() -> None:
    # Runs before the rerun, so the board and chat below already see the move.
    state: State = st.session_state["game"]
    state = with_pending_input(state, st.session_state.get(COMMAND_INPUT_KEY, ""))
    st.session_state["game"] = submit(state)


def command_form() -> None:
    with st.form("command_form", clear_on_submit=True, border=False):
        st.text_input(
            "Command",
            placeholder="Type command...",
            label_visibility="collapsed",
            key=COMMAND_INPUT_KEY,
        )
        st.form_submit_button("Send", on_click=_on_submit, use_container_width=True)


def display_grid(state: State, renderer: GridRenderer) -> None:
    st.image(renderer.render(state), use_container_width=True)


def display_chat(state: State) -> None:
    st.markdown(render_chat_html(state.chat), unsafe_allow_html=True)


def display_portrait(renderer: GridRenderer, image_path: str | None) -> None:
    st.image(renderer.render_portrait(image_path=image_path), width=300)
