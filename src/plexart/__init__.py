"""
An artwork sorting engine for Plex-style media libraries.

This package matches loose downloaded artwork (and archives of artwork)
against an existing media library's show folders, then classifies, renames
and relocates each image into the exact filename and directory position a
media server expects. Existing copies at the destination are overwritten.

The package is organized into several categories:
- Library indexing: target show folders, season folders and episode videos.
- Archive staging: unpacking matched archives into the source tree.
- Classification: pure filename grammar for backdrops, posters and thumbnails.
- Relocation: moving recognized artwork into the target library.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
