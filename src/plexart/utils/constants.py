"""
Constants and configuration settings for artwork processing.

This module contains the extension sets recognized by each stage, the
filename and folder grammars used for classification, the default retry
policy for deleting extracted archives, and the name of the external
extractor. A `.env` file, when present, is loaded so the extractor can be
configured without touching the command line.
"""

import os
import re

from dotenv import load_dotenv

load_dotenv()

# Accepted file extensions
ARCHIVE_EXTENSIONS = {".zip", ".rar", ".7z"}
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png"}
RELOCATE_IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp"}
VIDEO_EXTENSIONS = {".mkv", ".mp4", ".avi", ".mov", ".mpg", ".ts"}

# Folder grammar
SHOW_KEY_REGEX = re.compile(r"^.+ \(\d{4}\)$")
SEASON_FOLDER_REGEX = re.compile(r"^season (\d{1,2})$", re.IGNORECASE)
SPECIALS_FOLDER = "Specials"

# Filename grammar
SEASON_EPISODE_REGEX = re.compile(r"S(\d{1,2})\s*E(\d{1,2})", re.IGNORECASE)
BACKDROP_SUFFIX_REGEX = re.compile(r"^(?P<prefix>.+) - backdrop$", re.IGNORECASE)
SEASON_POSTER_SUFFIX_REGEX = re.compile(r"^(?P<prefix>.+) - season (?P<season>\d{1,2})$", re.IGNORECASE)
SEASON_POSTER_NAME_REGEX = re.compile(r"^season(?P<season>\d{2})-poster$", re.IGNORECASE)
THUMB_NAME_REGEX = re.compile(r"^(?P<base>.+)-thumb$", re.IGNORECASE)

# Output names
BACKDROP_NAME = "backdrop"
FOLDER_NAME = "folder"
SPECIALS_POSTER_NAME = "season-specials-poster"
THUMB_SUFFIX = "-thumb"

# External extractor
EXTRACTOR_CANDIDATES = [
    "7z", "7za", "7zz",
    r"C:\Program Files\7-Zip\7z.exe",
    r"C:\Program Files (x86)\7-Zip\7z.exe",
    "/usr/bin/7z", "/usr/local/bin/7z", "/opt/homebrew/bin/7z",
]
EXTRACTOR_PATH = os.getenv("PLEXART_EXTRACTOR")

# Retry settings for deleting extracted archives
DELETE_MAX_ATTEMPTS = 5
DELETE_RETRY_DELAY = 1.0

# Settings sidecar
SETTINGS_FILE = "settings.json"
