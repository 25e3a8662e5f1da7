"""
Datasets package public API.

Re-export the generators and container builders so callers can write:
    from rangesort.datasets import make_dataset, build_container
"""

from .containers import CONTAINER_CAPABILITY, build_container, read_container
from .generators import SUPPORTED_DISTS, make_dataset, tag_items

__all__ = [
    "SUPPORTED_DISTS",
    "make_dataset",
    "tag_items",
    "CONTAINER_CAPABILITY",
    "build_container",
    "read_container",
]
