"""Japanese language processing module."""

from .phonetics import JapanesePhonetics
from .romanizer import JapaneseRomanizer
from .tokenizer import JapaneseWordSplitter, JANOME_POS_MAP, normalize_pos

__all__ = [
    'JapanesePhonetics',
    'JapaneseRomanizer',
    'JapaneseWordSplitter',
    'JANOME_POS_MAP',
    'normalize_pos'
]
