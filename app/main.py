import os
import streamlit as st

from pyrsistent import thaw

from config import (
    AppConfig,
    apply_config,
    get_config_from_widgets,
    make_game_and_reset,
    set_default_config,
)
from components import (
    command_form,
    display_chat,
    display_grid,
    display_portrait,
)
from grid_adventure.renderer import GridRenderer
from grid_adventure.state import State

script_dir: str = os.path.dirname(os.path.realpath(__file__))

st.set_page_config(layout="wide", page_title="Grid Adventure")

with open(os.path.join(script_dir, "styles.css")) as f:
    st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


# --------- Main App ---------

set_default_config()
if "game" not in st.session_state:
    make_game_and_reset()

config: AppConfig = st.session_state["config"]
show_state_tab: bool = config.show_state_tab
tab_names = ["Game", "Config"] + (["State"] if show_state_tab else [])
tabs = st.tabs(tab_names)

with tabs[1]:
    new_config: AppConfig = get_config_from_widgets()
    if st.button("Save", key="save_config_btn", use_container_width=True):
        apply_config(new_config)
    st.divider()

with tabs[0]:
    config = st.session_state["config"]
    renderer = GridRenderer(resolution=config.resolution)

    st.markdown("<h1 class='game-title'>Grid Adventure</h1>", unsafe_allow_html=True)

    _, middle_col, right_col = st.columns([0.2, 0.5, 0.3])

    with right_col:
        if st.button("🔁 New Game", key="new_game_btn", use_container_width=True):
            make_game_and_reset()

    # Read after the buttons above: they may have replaced the game.
    state: State = st.session_state["game"]

    with right_col:
        st.info(
            f"**Position:** ({state.position.x}, {state.position.y})", icon="📍"
        )
        st.info(f"**Commands:** {state.turn}", icon="⌨️")

    with middle_col:
        display_grid(state, renderer)

    chat_col, portrait_col = st.columns([0.7, 0.3], vertical_alignment="bottom")
    with chat_col:
        display_chat(state)
        command_form()
    with portrait_col:
        display_portrait(renderer, config.player_image)

if show_state_tab:
    with tabs[2]:
        st.json(thaw(st.session_state["game"].description), expanded=1)
