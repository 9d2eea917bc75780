from __future__ import annotations

from typing import Sequence

from avatar.components.grid_config import GridConfig
from avatar.components.icon_placement import IconPlacement
from avatar.components.scale import Scale
from avatar.constants import LOWER_SCALE_BOUNDARY, UPPER_SCALE_BOUNDARY


def assign_grid_layout(icons: Sequence[object], config: GridConfig) -> list[IconPlacement]:
    """Place icons in a serpentine lane grid, one fold step per icon.

    Each lane is filled top to bottom at every other row; once a lane wraps
    vertically the next icon moves one lane right, with rows offset by one
    icon edge so neighbouring lanes interleave. Scale alternates between the
    two boundaries from one icon to the next.
    """
    edge = config.icon_edge
    gap = config.icons_gap
    height = config.container_height

    placements: list[IconPlacement] = []
    current_x = 0
    current_y = -edge
    current_scale = Scale(value=LOWER_SCALE_BOUNDARY, is_growing=True)

    for idx, _icon in enumerate(icons):
        placements.append(IconPlacement(index=idx, x=current_x, y=current_y, scale=current_scale))

        is_odd_column = current_x % gap == 0
        if is_odd_column and current_y + gap == gap + height:
            next_y = 0
        elif not is_odd_column and current_y + gap == height + edge:
            next_y = -edge
        else:
            next_y = current_y + gap

        next_x = current_x + edge if current_y > next_y else current_x

        if current_scale.is_growing:
            next_scale = Scale(value=UPPER_SCALE_BOUNDARY, is_growing=False)
        else:
            next_scale = Scale(value=LOWER_SCALE_BOUNDARY, is_growing=True)

        current_x, current_y, current_scale = next_x, next_y, next_scale

    return placements
