"""Kana to romanji conversion.

The converter walks a kana string codepoint by codepoint. At every position
it greedily combines the current kana with following "edible" kana (small
ya/yu/yo, small e/i and the plain vowels) as long as the combined unit has
a conversion, then applies the contextual rules:

* small tsu doubles the first consonant of the following kana,
* "n" assimilates to the following kana (e.g. ``n'`` before a vowel),
* particles are romanized by pronunciation when the word is a postposition,
* a long vowel in the word's pronunciation folds the vowel into the
  previous one (``とう`` pronounced ``トー`` becomes ``tō``).

Nothing here raises on unknown input: kana without a conversion simply
contribute an empty string.
"""

import re
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from romanji.base import BaseConverter, BaseWord
from romanji.schema import ConversionTables, POSTPOSITION, PROPER_NOUN


SMALL_TSU = "っ"
LONG_VOWEL_MARK = "ー"

# Kana that can be appended to the previous kana to form a single unit
EDIBLE = frozenset(["ゃ", "ゅ", "ょ", "ぇ", "ぃ", "あ", "い", "う", "え", "お"])

_WORD_START_RE = re.compile(r"(^|\s)(\S)")


class ComboResolver:
    """Longest-match extension of a kana run against a conversion table."""

    def __init__(self, conversions: Mapping[str, str], edible=EDIBLE):
        self._conversions = conversions
        self._edible = edible
        # A unit can never be wider than the widest key in the table
        self.max_width = max((len(key) for key in conversions), default=1)

    def extend(self, characters: Sequence[str], index: int) -> Tuple[str, int]:
        """Return the unit starting at *index* and how many extra codepoints it ate.

        Each step tentatively appends the next codepoint if it is edible and
        only commits when the combination is itself a table key, so no invalid
        intermediate unit is ever accepted. There is no backtracking.
        """
        current = characters[index]
        eaten = 0
        position = index + 1
        while len(current) < self.max_width and position < len(characters):
            following = characters[position]
            if following not in self._edible:
                break
            combo = current + following
            if combo not in self._conversions:
                break
            current = combo
            eaten += 1
            position += 1
        return current, eaten


class RomanjiConverter(BaseConverter):
    """Converts hiragana to romanji with a configurable set of tables."""

    def __init__(
        self,
        conversions: Optional[Mapping[str, str]] = None,
        verb_combos: Optional[Mapping[str, str]] = None,
        n_conversions: Optional[Mapping[str, str]] = None,
        particle_conversions: Optional[Mapping[str, str]] = None,
        tsu_conversions: Optional[Mapping[str, str]] = None,
    ):
        self.configure(
            conversions or {},
            verb_combos or {},
            n_conversions or {},
            particle_conversions or {},
            tsu_conversions or {},
        )

    @classmethod
    def from_tables(cls, tables: ConversionTables) -> "RomanjiConverter":
        return cls(
            tables.conversions,
            tables.verb_combos,
            tables.n_conversions,
            tables.particle_conversions,
            tables.tsu_conversions,
        )

    @classmethod
    def from_style(cls, name: str) -> "RomanjiConverter":
        """Build a converter from a named style (see romanji.styles)."""
        from romanji.styles import load_style
        return cls.from_tables(load_style(name))

    def configure(
        self,
        conversions: Mapping[str, str],
        verb_combos: Mapping[str, str],
        n_conversions: Mapping[str, str],
        particle_conversions: Mapping[str, str],
        tsu_conversions: Mapping[str, str],
    ) -> None:
        """Store read-only copies of the tables.

        The tables are not checked against each other; a special-case entry
        that can never match a base conversion is simply never used.
        """
        self.conversions = MappingProxyType(dict(conversions))
        self.verb_combos = MappingProxyType(dict(verb_combos))
        self.n_conversions = MappingProxyType(dict(n_conversions))
        self.particle_conversions = MappingProxyType(dict(particle_conversions))
        self.tsu_conversions = MappingProxyType(dict(tsu_conversions))
        self._resolver = ComboResolver(self.conversions)

    def convert(self, string: str, word: BaseWord) -> str:
        """Convert the kana *string* of *word* to romanji."""
        characters = list(string)
        count = len(characters)
        results = ""
        index = 0
        skip = 0

        while True:
            index += skip
            if index >= count:
                break

            char = characters[index]
            next_char = characters[index + 1] if index + 1 < count else None

            char_to_convert, skip = self._resolver.extend(characters, index)

            if char == SMALL_TSU and self.can_be_romanji(next_char):
                results += self._convert_small_tsu(next_char)
                index += 1
                continue

            converted = self.conversions.get(char_to_convert, "")

            if converted == "n":
                converted = self._convert_n(next_char, converted)

            if self._particle_can_be_converted(word, converted):
                converted = self.particle_conversions[converted]

            if self._verb_can_be_combined(converted, results, word, index):
                converted = self._get_combined_char(converted, results)
                results = results[:-1]

            results += converted
            index += 1

        return self._upper_case_names(results, word)

    def can_be_romanji(self, value: Optional[str]) -> bool:
        return value is not None and value in self.conversions

    def _convert_small_tsu(self, next_char: str) -> str:
        """Doubling consonant for the kana following a small tsu."""
        first = self.conversions[next_char][:1]
        return self.tsu_conversions.get(first, first)

    def _convert_n(self, next_char: Optional[str], converted: str) -> str:
        next_romanji = self.conversions.get(next_char, "") if next_char else ""
        first = next_romanji[:1]
        if first and first in self.n_conversions:
            return self.n_conversions[first]
        return converted

    def _particle_can_be_converted(self, word: BaseWord, converted: str) -> bool:
        return word.part_of_speech() == POSTPOSITION and converted in self.particle_conversions

    def _verb_can_be_combined(self, converted: str, results: str, word: BaseWord, index: int) -> bool:
        return (
            self._equals_previous(converted, results)
            and converted in self.verb_combos
            and word.pronunciation_at(index) == LONG_VOWEL_MARK
        )

    @staticmethod
    def _equals_previous(converted: str, results: str) -> bool:
        last = results[-1:]
        return converted == last or (converted == "u" and last == "o")

    def _get_combined_char(self, converted: str, results: str) -> str:
        if converted == "u" and results[-1:] == "o":
            # ou read as a long o; fall back to the u entry when o has none
            return self.verb_combos.get("o", self.verb_combos[converted])
        return self.verb_combos[converted]

    @staticmethod
    def _upper_case_names(romanji: str, word: BaseWord) -> str:
        if word.part_of_speech() == PROPER_NOUN:
            return _WORD_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), romanji)
        return romanji
