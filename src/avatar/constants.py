# Grid geometry, in multiples of the icon edge.
CONTAINER_WIDTH_EDGES = 10
CONTAINER_HEIGHT_EDGES = 11
# Portrait is drawn this many icon edges wide/high.
PROFILE_IMAGE_EDGES = 13

# Seconds for one full top-to-bottom traversal.
FULL_VERTICAL_DURATION = 6
# Seconds for one full grow/shrink oscillation.
ICONS_SCALE_DURATION = 4

# Delta from the middle (1.0) to one of the scale boundaries.
SCALE_DELTA = 0.15
LOWER_SCALE_BOUNDARY = 1 - SCALE_DELTA
UPPER_SCALE_BOUNDARY = 1 + SCALE_DELTA
# Share of the oscillation spent going from the middle to one boundary.
SCALE_DELTA_TIME_RATIO = 0.25

PROFILE_IMAGE_SCALE_DURATION_SECONDS = 1
PROFILE_IMAGE_SCALE_DURATION_MS = 1000
PROFILE_IMAGE_HOVER_SCALE = 1.1

SPARKLE_REPEAT_DELAY = 4
SPARKLE_DELAY = 1.5
SPARKLE_DURATION = 1
# Sparkle glyph anchor and size as fractions of the container.
SPARKLE_ANCHOR_PCT = (0.47, 0.52)
SPARKLE_SIZE_PCT = 0.06
