"""Relocation of normalized artwork from source show subfolders into the target library."""
from .batch import relocate_all, relocate_folder

__all__ = ["relocate_all", "relocate_folder"]
