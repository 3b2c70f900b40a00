"""
Utility functions for running system commands and locating the archive extractor.

Functions:
    - run_cmd: Executes a system command and returns its exit code along with its
      standard output and error streams.
    - find_extractor: Resolves the 7-Zip compatible extractor executable, or
      returns None when it is not installed.
    - build_extract_cmd: Builds the "extract all, overwrite, no prompts" command.
"""
import os
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple

from plexart.utils.constants import EXTRACTOR_CANDIDATES, EXTRACTOR_PATH


def run_cmd(cmd: List[str]) -> Tuple[int, str, str]:
    """
    Run a command and return (code, stdout, stderr).

    Output is decoded leniently: archive member names are not always valid
    in the locale encoding, and undecodable bytes become U+FFFD.
    """
    p = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True, errors="replace")
    return p.returncode, p.stdout, p.stderr


def find_extractor(preferred: Optional[str] = None) -> Optional[str]:
    """
    Resolve the extractor executable.

    An explicit `preferred` path (or the PLEXART_EXTRACTOR environment
    variable) is used when it exists or is found on PATH; otherwise the
    usual 7-Zip names and install locations are tried in order.
    """
    explicit = preferred or EXTRACTOR_PATH
    candidates = [explicit] if explicit else EXTRACTOR_CANDIDATES
    for candidate in candidates:
        if os.path.isfile(candidate):
            return candidate
        found = shutil.which(candidate)
        if found:
            return found
    return None


def build_extract_cmd(extractor: str, archive: Path, destination: Path) -> List[str]:
    """Extract everything from `archive` into `destination`, overwriting, without prompts."""
    return [extractor, "x", str(archive), f"-o{destination}", "-aoa", "-y"]
