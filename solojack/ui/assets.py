"""
Card image lookup for the presentation layer.

Images follow the SVG-cards naming scheme, e.g. ``heart_1.png`` for the Ace of
hearts and ``spade_king.png`` for the King of spades. Paths are prefixed with
the ``SOLOJACK_ASSET_ROOT`` environment variable (empty by default). When the
images are not available the page draws the cards as text instead.
"""

import os
from typing import Optional

from solojack.common.card import Card, Rank

CARD_IMAGE_DIR = "SVG-cards/png/1x"

# Label for a face-down card
HIDDEN_CARD_LABEL = "??"


def asset_root() -> str:
    return os.environ.get("SOLOJACK_ASSET_ROOT", "")


def card_image_name(card: Card) -> str:
    """Return the image identifier for a card; Aces are numbered 1."""
    rank = "1" if card.rank == Rank.ACE else card.rank.value
    return f"{card.suit.value[:-1]}_{rank}"


def card_image_path(card: Card, root: Optional[str] = None) -> str:
    if root is None:
        root = asset_root()
    return f"{root}/{CARD_IMAGE_DIR}/{card_image_name(card)}.png"


def card_back_image_path(root: Optional[str] = None) -> str:
    if root is None:
        root = asset_root()
    return f"{root}/{CARD_IMAGE_DIR}/back.png"


def is_displayable(path: str) -> bool:
    """Whether an image path can be handed to the page: a URL or an existing file."""
    if path.startswith(("http://", "https://")):
        return True
    return os.path.isfile(path)
