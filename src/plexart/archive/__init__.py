"""Archive staging for artwork downloads.

This package provides two levels of functionality:
- core: Low-level helpers (extractor call, retrying delete, non-image pruning)
- batch: The staging stage over all archives in the source root
"""

from .core import delete_archive, extract_archive, prune_non_images
from .batch import stage_archives

__all__ = [
    "extract_archive",
    "delete_archive",
    "prune_non_images",
    "stage_archives",
]
