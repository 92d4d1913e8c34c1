from abc import ABC, abstractmethod
from typing import Optional


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class StyleError(Exception):
    """Base class for romanization style problems."""
    def __init__(self, style: str, reason: str):
        super().__init__(f"Romanization style '{style}': {reason}")
        self.style = style
        self.reason = reason

class StyleNotFoundError(StyleError):
    """Raised when no style file exists for the requested name."""
    def __init__(self, style: str, searched: Optional[list] = None):
        self.searched = list(searched or [])
        where = ", ".join(self.searched) if self.searched else "no directories"
        super().__init__(style, f"not found (searched {where})")

class StyleLoadError(StyleError):
    """Raised when a style file is invalid or its inheritance chain loops."""


class BaseWord(ABC):
    """Read-only view of a word as needed by the romanji converter.

    Only two things are ever consulted: the part of speech, and the
    pronunciation codepoint aligned with a position of the kana string.
    """

    @abstractmethod
    def part_of_speech(self) -> str:
        """Normalized part-of-speech tag (e.g. 'postposition', 'proper noun')."""
        pass

    @abstractmethod
    def pronunciation_at(self, index: int) -> Optional[str]:
        """Pronunciation codepoint at *index*, or None when out of range."""
        pass

class BaseConverter(ABC):
    """Abstract base class for kana to Latin converters"""

    @abstractmethod
    def convert(self, string: str, word: BaseWord) -> str:
        """Convert *string* to romanji using *word* for context"""
        pass
