from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st

from grid_adventure.renderer import DEFAULT_RESOLUTION, is_loadable_image
from grid_adventure.state import new_game
from grid_adventure.utils.logging import get_logger

script_dir: str = os.path.dirname(os.path.realpath(__file__))

DEFAULT_PLAYER_IMAGE: str = os.path.join(script_dir, "assets", "player.png")
LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass(frozen=True)
class AppConfig:
    resolution: int
    player_image: Optional[str]
    log_level: str
    show_state_tab: bool


def _initial_config() -> AppConfig:
    return AppConfig(
        resolution=DEFAULT_RESOLUTION,
        player_image=(
            DEFAULT_PLAYER_IMAGE if os.path.isfile(DEFAULT_PLAYER_IMAGE) else None
        ),
        log_level="WARNING",
        show_state_tab=True,
    )


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = _initial_config()
    get_logger(st.session_state["config"].log_level)


def get_config_from_widgets() -> AppConfig:
    current: AppConfig = st.session_state["config"]

    st.subheader("Rendering")
    resolution = st.slider(
        "Board resolution (px)",
        min_value=200,
        max_value=1000,
        value=current.resolution,
        step=20,
        key="resolution_slider",
    )
    player_image = st.text_input(
        "Player image path",
        value=current.player_image or "",
        help="Leave empty to draw a placeholder token.",
        key="player_image_input",
    ).strip()

    st.subheader("Debug")
    log_level = st.selectbox(
        "Log level",
        LOG_LEVELS,
        index=LOG_LEVELS.index(current.log_level),
        key="log_level_select",
    )
    show_state_tab = st.checkbox(
        "Show state JSON", value=current.show_state_tab, key="show_state_checkbox"
    )

    return AppConfig(
        resolution=resolution,
        player_image=player_image or None,
        log_level=log_level,
        show_state_tab=show_state_tab,
    )


def apply_config(config: AppConfig) -> None:
    """Store ``config`` and surface image problems before the next render."""
    image = config.player_image
    if image is not None and not is_loadable_image(image):
        st.error(f"Player image missing or unreadable: {config.player_image}")
        return
    st.session_state["config"] = config
    get_logger(config.log_level).info("Config saved: %s", config)


def make_game_and_reset() -> None:
    """Start a new game, dropping the old transcript."""
    st.session_state["game"] = new_game()
