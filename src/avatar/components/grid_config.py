"""Grid geometry shared read-only by every icon of one avatar."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from avatar.constants import CONTAINER_HEIGHT_EDGES, CONTAINER_WIDTH_EDGES


class ProfilePicSize(Enum):
    LARGE = "LARGE"
    SMALL = "SMALL"


ICON_EDGE_SIZES = {
    ProfilePicSize.LARGE: 50,
    ProfilePicSize.SMALL: 30,
}


class GridConfigError(ValueError):
    """Raised when grid dimensions cannot produce a whole-lane serpentine layout."""


@dataclass(frozen=True, slots=True)
class GridConfig:
    """Pixel geometry of the icon grid.

    ``container_width`` must be an exact multiple of ``icon_edge`` so every
    lane is a whole icon wide, and ``container_height`` an odd multiple so the
    serpentine fold reaches its wrap rows in both column parities.
    """

    icon_edge: int
    container_width: int
    container_height: int

    def __post_init__(self) -> None:
        if self.icon_edge <= 0:
            raise GridConfigError(f"icon_edge must be positive, got {self.icon_edge}")
        if self.container_width <= 0 or self.container_width % self.icon_edge != 0:
            raise GridConfigError(
                f"container_width {self.container_width} is not a positive multiple "
                f"of icon_edge {self.icon_edge}"
            )
        height_edges, remainder = divmod(self.container_height, self.icon_edge)
        if self.container_height <= 0 or remainder != 0 or height_edges % 2 == 0:
            raise GridConfigError(
                f"container_height {self.container_height} is not an odd multiple "
                f"of icon_edge {self.icon_edge}"
            )

    @classmethod
    def from_size(cls, size: ProfilePicSize) -> "GridConfig":
        edge = ICON_EDGE_SIZES[size]
        return cls(
            icon_edge=edge,
            container_width=edge * CONTAINER_WIDTH_EDGES,
            container_height=edge * CONTAINER_HEIGHT_EDGES,
        )

    @property
    def lane_count(self) -> int:
        return int(self.container_width // self.icon_edge)

    @property
    def hidden_padding(self) -> int:
        return self.icon_edge

    @property
    def full_vertical_span(self) -> int:
        return self.container_height + self.hidden_padding * 2

    @property
    def icons_gap(self) -> int:
        # gap between 2 icons
        return 2 * self.icon_edge

    @property
    def capacity(self) -> int:
        """Number of icons the serpentine layout places before leaving the last lane."""
        height_edges = int(self.container_height // self.icon_edge)
        odd_lane_slots = (height_edges + 1) // 2 + 1
        even_lane_slots = (height_edges - 1) // 2 + 1
        odd_lanes = (self.lane_count + 1) // 2
        even_lanes = self.lane_count // 2
        return odd_lanes * odd_lane_slots + even_lanes * even_lane_slots
