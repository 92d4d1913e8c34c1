import os
from typing import List

from dotenv import load_dotenv

from romanji import DEFAULT_STYLE, STYLES_DIR

load_dotenv()

ROMANJI_STYLE = os.getenv("ROMANJI_STYLE", DEFAULT_STYLE)
ROMANJI_STYLES_DIR = os.getenv("ROMANJI_STYLES_DIR")
ROMANJI_LOG_LEVEL = os.getenv("ROMANJI_LOG_LEVEL", "INFO").upper()


def style_search_path() -> List[str]:
    """Directories searched for style files, user directory first."""
    dirs = []
    if ROMANJI_STYLES_DIR:
        dirs.append(os.path.abspath(ROMANJI_STYLES_DIR))
    dirs.append(STYLES_DIR)
    return dirs
