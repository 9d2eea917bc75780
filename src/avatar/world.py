from __future__ import annotations

import logging
from typing import Sequence

from esper import World
from avatar.animation_factory import AnimationFactory
from avatar.components.grid_config import GridConfig, GridConfigError, ProfilePicSize
from avatar.components.hover_state import HoverState
from avatar.components.profile_image import ProfileImage
from avatar.factories.icons import build_icon_registry
from avatar.utils.layout import assign_grid_layout

logger = logging.getLogger(__name__)


def create_world(
    size: ProfilePicSize = ProfilePicSize.LARGE,
    *,
    config: GridConfig | None = None,
    icons: Sequence[str] | None = None,
) -> World:
    """Build the avatar world: one entity per icon plus the hover, sparkle and portrait resources.

    ``config`` overrides the geometry derived from ``size``; ``icons`` overrides
    the default registry. The grid config is exposed as ``world.grid_config``.
    """
    grid_config = config or GridConfig.from_size(size)
    registry = list(icons) if icons is not None else build_icon_registry()
    if len(registry) > grid_config.capacity:
        raise GridConfigError(
            f"{len(registry)} icons do not fit a grid with {grid_config.capacity} slots"
        )

    world = World()
    setattr(world, "grid_config", grid_config)

    # Register the global hover state resource.
    world.create_entity(HoverState())
    world.create_entity(ProfileImage())

    factory = AnimationFactory(world)
    for asset, placement in zip(registry, assign_grid_layout(registry, grid_config)):
        factory.create_icon(asset, placement)
    factory.create_sparkle()

    logger.debug(
        "Avatar world created: %d icons over %d lanes (edge=%s)",
        len(registry),
        grid_config.lane_count,
        grid_config.icon_edge,
    )
    return world
