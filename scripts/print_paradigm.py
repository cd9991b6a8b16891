#!/usr/bin/env python3
"""Print conjugation tables for a handful of sample words.

Usage:
  python scripts/print_paradigm.py            # sample words
  python scripts/print_paradigm.py 書く かく Godan
"""

import sys
from pathlib import Path

# Add src to python path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root / "src"))

from services import NO_RULE, Word, WordType, conjugate, explain_rule

SAMPLES = [
    Word("食べる", "たべる", WordType.ICHIDAN),
    Word("飲む", "のむ", WordType.GODAN),
    Word("行く", "いく", WordType.GODAN),
    Word("勉強する", "べんきょうする", WordType.IRREGULAR),
    Word("来る", "くる", WordType.IRREGULAR),
    Word("高い", "たかい", WordType.I_ADJECTIVE),
    Word("綺麗", "きれい", WordType.NA_ADJECTIVE),
]


def print_table(word: Word) -> None:
    """Print every non-empty form of a word with its rule, if any."""
    print("=" * 60)
    print(f"{word.kanji} ({word.kana}) - {word.type}")
    print("=" * 60)

    for form, value in conjugate(word).items():
        if not value:
            continue
        rule = explain_rule(word.type, form)
        hint = "" if rule == NO_RULE else f"  ({rule})"
        print(f"  {form:<36} {value}{hint}")
    print()


def main():
    if len(sys.argv) == 4:
        kanji, kana, word_type = sys.argv[1:]
        print_table(Word(kanji, kana, word_type))
        return

    for word in SAMPLES:
        print_table(word)


if __name__ == "__main__":
    main()
