"""
Blackjack table UI for solojack.

This module provides a Streamlit page for playing rounds against the dealer.
Run it with ``streamlit run solojack/ui/blackjack_ui.py``.
"""

import logging
from typing import Sequence

import pandas as pd
import streamlit as st

from solojack.blackjack.state import GameState
from solojack.blackjack.transitions import StateTransitionEngine
from solojack.events import EngineEventType, EventBus
from solojack.ui.assets import is_displayable
from solojack.ui.view import build_table_view

logger = logging.getLogger(__name__)


class BlackjackUI:
    """
    Streamlit-based UI for a single player against the dealer.

    The page keeps exactly one GameState in the session state and replaces it
    after every button press. Finished rounds are added to the session
    history when the engine reports them.
    """

    def __init__(self):
        """Initialize the BlackjackUI."""
        if "game_state" not in st.session_state:
            st.session_state.game_state = StateTransitionEngine.setup_game()
            st.session_state.history = []
            st.session_state.round_number = 1

    @property
    def state(self) -> GameState:
        return st.session_state.game_state

    def _record_round(self, event: dict) -> None:
        st.session_state.history.append(
            {
                "round": st.session_state.round_number,
                "player_score": event["player_score"],
                "dealer_score": event["dealer_score"],
                "result": event["result"],
            }
        )

    def _listening(self):
        return EventBus.get_instance().listening(
            {EngineEventType.ROUND_ENDED: self._record_round}
        )

    def hit(self) -> None:
        with self._listening():
            st.session_state.game_state = StateTransitionEngine.player_hits(self.state)

    def stand(self) -> None:
        with self._listening():
            st.session_state.game_state = StateTransitionEngine.player_stands(self.state)

    def reset(self) -> None:
        st.session_state.round_number += 1
        st.session_state.game_state = StateTransitionEngine.setup_game()
        logger.debug("Round %d started", st.session_state.round_number)

    def render_controls(self, controls_enabled: bool) -> None:
        hit_col, stand_col, reset_col = st.columns(3)
        hit_col.button(
            "Hit", key="hit", disabled=not controls_enabled, on_click=self.hit
        )
        stand_col.button(
            "Stand", key="stand", disabled=not controls_enabled, on_click=self.stand
        )
        reset_col.button("Reset", key="reset", on_click=self.reset)

    def render_cards(self, images: Sequence[str], labels: Sequence[str]) -> None:
        # Cards without an image on hand are drawn as text
        for col, image, label in zip(st.columns(len(labels)), images, labels):
            if is_displayable(image):
                col.image(image, width=90)
            else:
                col.markdown(label)

    def render_history(self) -> None:
        if not st.session_state.history:
            return
        st.subheader("Session history")
        history = pd.DataFrame(st.session_state.history)
        st.dataframe(history, hide_index=True)
        st.bar_chart(history["result"].value_counts())

    def render(self) -> None:
        st.title("Blackjack")
        view = build_table_view(self.state)

        st.write(f"There are {view.cards_remaining} cards left in deck")
        self.render_controls(view.controls_enabled)

        st.subheader("Player Cards")
        self.render_cards(view.player_images, view.player_labels)
        st.write(f"Player Score {view.player_score}")

        st.subheader("Dealer Cards")
        self.render_cards(view.dealer_images, view.dealer_labels)
        if view.dealer_score is not None:
            st.write(f"Dealer Score {view.dealer_score}")

        st.markdown(f"**{view.status}**")
        self.render_history()


def main():
    st.set_page_config(page_title="Blackjack")
    BlackjackUI().render()


if __name__ == "__main__":
    main()
