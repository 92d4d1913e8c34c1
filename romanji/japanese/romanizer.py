"""Sentence-level Japanese romanization."""

from typing import List, Optional

from romanji import config
from romanji.converter import RomanjiConverter
from romanji.logger import logger
from romanji.schema import RomanizedWord, Token
from .tokenizer import JapaneseWordSplitter

class JapaneseRomanizer:
    """Romanizes Japanese text word by word.

    Janome supplies each word's reading and pronunciation; the reading is
    fed to the converter, the pronunciation and part of speech are passed
    along as the word's metadata.
    """

    def __init__(self, style: Optional[str] = None, splitter: Optional[JapaneseWordSplitter] = None):
        """Initialize the romanizer; *style* defaults to ROMANJI_STYLE."""
        self.style = style or config.ROMANJI_STYLE
        self.converter = RomanjiConverter.from_style(self.style)
        self.splitter = splitter or JapaneseWordSplitter()

    def romanize_token(self, token: Token) -> RomanizedWord:
        if not self.splitter.phonetics.has_kana(token.reading):
            # Latin words, digits etc. have nothing to convert
            romanji = token.surface
        else:
            romanji = self.converter.convert(token.reading, token.metadata())
            if not romanji:
                logger.warning(f"No romanji for '{token.surface}' (reading '{token.reading}')")

        return RomanizedWord(
            surface=token.surface,
            reading=token.reading,
            pos=token.pos,
            romanji=romanji,
        )

    def romanize_words(self, sentence: str) -> List[RomanizedWord]:
        return [self.romanize_token(token) for token in self.splitter.split_sentence(sentence)]

    def romanize(self, sentence: str) -> str:
        """Romanize *sentence*, words separated by single spaces."""
        words = self.romanize_words(sentence)
        return " ".join(word.romanji for word in words if word.romanji)
