from dataclasses import dataclass


@dataclass(slots=True)
class IconSlot:
    """Position of an icon in the ordered registry and the asset it renders."""

    index: int
    asset: str
