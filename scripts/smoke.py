# scripts/smoke.py
"""
Smoke Test Script for textfathom.

Usage
-----
1. Test with the default sample text:
    $ python scripts/smoke.py

2. Test with a local text file:
    $ python scripts/smoke.py --file samples/essay.txt

3. Add the unique word listing:
    $ python scripts/smoke.py --words
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from textfathom.core.report import format_word_list
from textfathom.core.session import AnalysisSession

env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
DEFAULT_TEXT = """
Returns the number of words in the analysed text file or block. A word must
consist of letters a-z with at least one vowel sound, and optionally an
apostrophe or hyphen. Items such as "&, K108, NSW" are not counted as words.
Common abbreviations such a U.S. or numbers like 1.23 will not denote the end of
a sentence.

The Fog index, developed by Robert Gunning, is a well known and simple formula
for measuring readability.
"""


def main() -> int:
    parser = argparse.ArgumentParser(description="Run textfathom on sample input.")
    parser.add_argument("--file", type=Path, help="Plain-text file to analyse instead.")
    parser.add_argument("--words", action="store_true", help="Print the unique word list.")
    args = parser.parse_args()

    session = AnalysisSession()
    if args.file:
        session.analyse_file(args.file)
        if session.num_text_lines() == 0:
            print(f"⚠️  Nothing analysed: {args.file} is missing, empty or not plain text.")
            return 1
    else:
        session.analyse_block(DEFAULT_TEXT)

    print(session.report())
    if args.words:
        print(format_word_list(session.unique_words()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
