"""Grid Adventure game engine.

Pure, UI-independent game logic: a player token on a fixed grid driven by
typed ``"<direction> <distance>"`` commands, with an append-only chat
transcript. The Streamlit front-end under ``app/`` only reads and replaces the
immutable :class:`grid_adventure.state.State` produced here.
"""
