"""Japanese tokenization with readings and pronunciations."""

from typing import List
from janome.tokenizer import Tokenizer
from romanji.logger import logger
from romanji.schema import Token
from .phonetics import JapanesePhonetics

# Mapping from Janome Japanese POS tags to the tags the converter understands.
# Two-field keys ("名詞,固有名詞") win over the bare first field.
JANOME_POS_MAP = {
    "名詞": "noun",
    "名詞,固有名詞": "proper noun",
    "名詞,代名詞": "pronoun",
    "動詞": "verb",
    "形容詞": "adjective",
    "副詞": "adverb",
    "連体詞": "adjective",  # prenominal adjective
    "接続詞": "conjunction",
    "感動詞": "interjection",
    "助詞": "postposition",
    "助動詞": "auxiliary",
    "記号": "symbol",
    "フィラー": "filler",
    "その他": "other",
    "接頭詞": "prefix",
}

O_ROW_KATAKANA = frozenset("オコゴソゾトドノホボポモヨョロヲ")

def normalize_pos(part_of_speech: str) -> str:
    """Map a Janome part_of_speech string (comma separated) to a canonical tag."""
    pos_fields = [field.strip() for field in part_of_speech.split(',')]
    full_pos = ','.join(pos_fields[:2])
    return JANOME_POS_MAP.get(full_pos) or JANOME_POS_MAP.get(pos_fields[0], "other")

def is_conjugating(part_of_speech: str) -> bool:
    """Verbs and adjectives take conjugation suffixes."""
    return part_of_speech.startswith(("動詞", "形容詞"))

def is_conjugation_suffix(part_of_speech: str) -> bool:
    """Auxiliary verbs and conjunctive particles (て, ば, ...) attach to the word before."""
    return part_of_speech.startswith(("助動詞", "助詞,接続助詞"))

class JapaneseWordSplitter:
    """Splits Japanese sentences into words carrying the kana reading,
    the katakana pronunciation and a normalized part of speech."""

    def __init__(self):
        """Initialize the Japanese word splitter."""
        self._tokenizer = Tokenizer()
        self.phonetics = JapanesePhonetics()

    def split_sentence(self, sentence: str) -> List[Token]:
        tokens: List[Token] = []
        head_pos = None  # raw POS of the verb/adjective the last token was built on

        for token in self._tokenizer.tokenize(sentence, wakati=False):
            # Skip punctuation marks (Janome tags them as 記号, "symbols").
            if token.part_of_speech.startswith("記号"):
                head_pos = None
                continue

            surface = token.surface
            if token.reading != "*":
                reading = self.phonetics.to_hiragana(token.reading)
                pronunciation = token.phonetic if token.phonetic != "*" else token.reading
            else:
                # Unknown word: kana surfaces read as themselves, pykakasi for the rest
                reading = self.phonetics.reading_of(surface)
                pronunciation = self.phonetics.to_katakana(reading)
                logger.debug(f"No reading for '{surface}', using '{reading}'")

            # Long-vowel detection indexes the pronunciation by kana position,
            # which is only meaningful when both strings have the same length.
            if len(pronunciation) != len(reading):
                logger.debug(
                    f"Pronunciation '{pronunciation}' does not align with reading "
                    f"'{reading}' for '{surface}', ignoring it"
                )
                pronunciation = self.phonetics.to_katakana(reading)

            # Loanword readings carry "ー"; spell the vowel out, keep the mark
            # in the pronunciation so the converter lengthens it.
            reading = self.phonetics.expand_long_vowels(reading)

            if head_pos and is_conjugation_suffix(token.part_of_speech):
                tokens[-1] = self._merge(tokens[-1], surface, reading, pronunciation)
                continue

            head_pos = token.part_of_speech if is_conjugating(token.part_of_speech) else None
            tokens.append(Token(
                surface=surface,
                reading=reading,
                pronunciation=pronunciation,
                pos=normalize_pos(token.part_of_speech),
            ))

        return tokens

    @staticmethod
    def _merge(head: Token, surface: str, reading: str, pronunciation: str) -> Token:
        """Append a conjugation suffix to *head*, keeping the head's part of speech.

        A suffix starting with う after an o-row kana (行こ|う, 食べよ|う) is a
        long o across the boundary, so its pronunciation gets the "ー" mark.
        """
        if reading.startswith("う") and head.pronunciation[-1:] in O_ROW_KATAKANA:
            pronunciation = "ー" + pronunciation[1:]
        return Token(
            surface=head.surface + surface,
            reading=head.reading + reading,
            pronunciation=head.pronunciation + pronunciation,
            pos=head.pos,
        )

    def split_sentences(self, sentences: List[str]) -> List[List[Token]]:
        """Split multiple sentences."""
        return [self.split_sentence(sentence) for sentence in sentences]
