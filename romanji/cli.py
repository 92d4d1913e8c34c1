#!/usr/bin/env python3
"""Romanize Japanese text from the command line.

Examples:
    romanji 東京に行きます
    romanji --style kunrei_shiki < sentences.txt
    romanji --kana とうきょう --pronunciation トーキョー --pos "proper noun"
"""

import argparse
import json
import sys
from typing import Iterable, List, Optional

from romanji import config
from romanji.base import StyleError
from romanji.logger import logger
from romanji.schema import WordMetadata
from romanji.styles import available_styles


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="romanji",
        description="Convert Japanese text to romanji.",
    )
    parser.add_argument("text", nargs="*", help="Text to romanize (reads stdin lines when omitted)")
    parser.add_argument("--style", default=config.ROMANJI_STYLE,
                        help=f"Romanization style (default: {config.ROMANJI_STYLE})")
    parser.add_argument("--kana", action="store_true",
                        help="Treat the input as one word of hiragana and skip tokenization")
    parser.add_argument("--pos", default="",
                        help="Part of speech of the word, used with --kana")
    parser.add_argument("--pronunciation", default="",
                        help="Katakana pronunciation of the word, used with --kana")
    parser.add_argument("--words", action="store_true",
                        help="Print one JSON object per word instead of the sentence")
    parser.add_argument("--list-styles", action="store_true",
                        help="List the available styles and exit")
    return parser

def _read_inputs(args: argparse.Namespace) -> Iterable[str]:
    if args.text:
        yield " ".join(args.text)
        return
    for line in sys.stdin:
        line = line.strip()
        if line:
            yield line

def _convert_kana(args: argparse.Namespace) -> int:
    from romanji.converter import RomanjiConverter

    converter = RomanjiConverter.from_style(args.style)
    word = WordMetadata(pos=args.pos, pronunciation=args.pronunciation)
    for text in _read_inputs(args):
        print(converter.convert(text, word))
    return 0

def _convert_sentences(args: argparse.Namespace) -> int:
    from romanji.japanese import JapaneseRomanizer

    romanizer = JapaneseRomanizer(style=args.style)
    for text in _read_inputs(args):
        if args.words:
            for word in romanizer.romanize_words(text):
                print(json.dumps(word.model_dump(), ensure_ascii=False))
        else:
            print(romanizer.romanize(text))
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list_styles:
        for name in available_styles():
            print(name)
        return 0

    try:
        if args.kana:
            return _convert_kana(args)
        return _convert_sentences(args)
    except StyleError as e:
        logger.error(str(e))
        return 2

if __name__ == "__main__":
    sys.exit(main())
