"""Named constants shared across the package."""

from __future__ import annotations

# Gap divisor for comb sort; each round divides the gap by this factor.
COMB_SHRINK_FACTOR: float = 1.247

LOGGER_NAME: str = "rangesort"

# Container kinds understood by ``rangesort.datasets.build_container``.
CONTAINER_ARRAY = "array"
CONTAINER_BIDIRECTIONAL = "bidirectional"
CONTAINER_FORWARD = "forward"
CONTAINER_LINKED = "linked"
CONTAINER_FORWARD_LIST = "forward_list"

CONTAINER_KINDS = (
    CONTAINER_ARRAY,
    CONTAINER_BIDIRECTIONAL,
    CONTAINER_FORWARD,
    CONTAINER_LINKED,
    CONTAINER_FORWARD_LIST,
)
