from __future__ import annotations

from typing import Sequence

ICONS_ROUND: tuple[str, ...] = (
    "alien",
    "air-baloon",
    "lollipop",
    "cactus",
    "monster",
    "cat",
    "cherries",
    "ducky",
    "flower",
    "football",
    "frog",
    "guitar",
    "penguin",
    "monkey",
    "music",
    "ghost",
    "cassette",
    "pig",
    "pineapple",
    "robot",
    "sax",
    "star",
    "strawberries",
    "whale",
    "beer",
    "butterfly",
    "cake",
    "eggs",
    "donut",
    "goblin",
    "juice",
    "palm",
)

SIGNATURE_ICON = "gnome"


def build_icon_registry(
    base_round: Sequence[str] = ICONS_ROUND,
    *,
    rounds: int = 2,
    signature: str | None = SIGNATURE_ICON,
) -> list[str]:
    """Return the ordered icon list: ``rounds`` copies of the base set, then the signature icon.

    Order is significant; it seeds the serpentine layout.
    """
    icons: list[str] = []
    for _ in range(rounds):
        icons.extend(base_round)
    if signature:
        icons.append(signature)
    return icons
