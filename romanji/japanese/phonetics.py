"""Japanese kana utilities used to prepare converter input."""

import re
from typing import List
import jaconv
import pykakasi

VOWEL_KANA = {"a": "あ", "i": "い", "u": "う", "e": "え", "o": "お"}

class JapanesePhonetics:
    """Kana normalization and reading lookup."""

    def __init__(self):
        """Initialize the phonetics processor with pykakasi."""
        self._kks = pykakasi.kakasi()
        self._kana_only_re = re.compile(r"^[ぁ-んゔゕゖァ-ヴー]+$")
        self._has_kana_re = re.compile(r"[ぁ-んゔゕゖァ-ヴ]")

    @staticmethod
    def to_hiragana(kata: str) -> str:
        """Convert *kata* to hiragana, leaving the long-vowel mark "ー" alone."""
        return jaconv.kata2hira(kata)

    @staticmethod
    def to_katakana(hira: str) -> str:
        return jaconv.hira2kata(hira)

    def reading_of(self, surface: str) -> str:
        """Best-effort hiragana reading of *surface* via pykakasi.

        Used for words the tokenizer has no reading for. Characters pykakasi
        cannot read (latin letters, digits) come back unchanged.
        """
        return "".join(item["hira"] for item in self._kks.convert(surface))

    def expand_long_vowels(self, hira: str) -> str:
        """Replace each long-vowel mark "ー" with the kana of the vowel before it.

        こーひー becomes こおひい, so the reading spells the vowel out while the
        pronunciation keeps the mark. A mark with no vowel before it is kept.
        """
        result: List[str] = []
        for ch in hira:
            if ch == "ー" and result:
                ro = self._kks.convert(result[-1])[0]["hepburn"]
                match = re.search(r"[aeiou]$", ro)
                if match:
                    result.append(VOWEL_KANA[match.group(0)])
                    continue
            result.append(ch)
        return "".join(result)

    def is_kana_only(self, text: str) -> bool:
        """Check if text contains only kana characters."""
        return bool(self._kana_only_re.match(text))

    def has_kana(self, text: str) -> bool:
        return bool(self._has_kana_re.search(text))
