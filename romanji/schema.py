from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from romanji.base import BaseWord

POSTPOSITION = "postposition"
PROPER_NOUN = "proper noun"

class WordMetadata(BaseModel, BaseWord):
    pos: str = ""  # normalized tag; only 'postposition' and 'proper noun' matter
    pronunciation: str = ""  # katakana, aligned 1-to-1 with the kana string
    model_config = ConfigDict(frozen=True)

    def part_of_speech(self) -> str:
        return self.pos

    def pronunciation_at(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.pronunciation):
            return self.pronunciation[index]
        return None

class ConversionTables(BaseModel):
    """The five lookup tables a RomanjiConverter is configured with."""
    conversions: Dict[str, str]
    verb_combos: Dict[str, str] = Field(default_factory=dict)
    n_conversions: Dict[str, str] = Field(default_factory=dict)
    particle_conversions: Dict[str, str] = Field(default_factory=dict)
    tsu_conversions: Dict[str, str] = Field(default_factory=dict)
    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("conversions")
    @classmethod
    def _conversions_not_empty(cls, value: Dict[str, str]) -> Dict[str, str]:
        for kana, romanji in value.items():
            if not kana:
                raise ValueError("conversion keys must be non-empty kana")
            if not romanji:
                raise ValueError(f"conversion for '{kana}' must not be empty")
        return value

    @field_validator("verb_combos", "n_conversions", "particle_conversions", "tsu_conversions")
    @classmethod
    def _keys_not_empty(cls, value: Dict[str, str]) -> Dict[str, str]:
        if any(not key for key in value):
            raise ValueError("table keys must be non-empty")
        return value

class StyleFile(BaseModel):
    """Raw contents of a style file; a null value removes an inherited entry."""
    name: str = Field(..., min_length=1)
    description: str = ""
    extends: Optional[str] = None
    conversions: Dict[str, Optional[str]] = Field(default_factory=dict)
    verb_combos: Dict[str, Optional[str]] = Field(default_factory=dict)
    n_conversions: Dict[str, Optional[str]] = Field(default_factory=dict)
    particle_conversions: Dict[str, Optional[str]] = Field(default_factory=dict)
    tsu_conversions: Dict[str, Optional[str]] = Field(default_factory=dict)
    model_config = ConfigDict(extra="forbid")

class Token(BaseModel):
    surface: str
    reading: str  # hiragana
    pronunciation: str  # katakana as reported by the tokenizer
    pos: str

    def metadata(self) -> WordMetadata:
        return WordMetadata(pos=self.pos, pronunciation=self.pronunciation)

class RomanizedWord(BaseModel):
    surface: str
    reading: str
    pos: str
    romanji: str
