# cli.py
"""dna-match <algorithm> <dna_sequence_file> <pattern_file or second_dna_sequence_file>"""

import argparse
import logging
import sys

from algorithms.errors import DnaMatchError
from algorithms.modes import MODE_NAMES, run
from config import load_settings
from utils.text_io import read_sequence

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dna-match",
        description="Count pattern occurrences (bf, kr) or measure the LCSS distance (lcss) "
                    "between two dna sequences.",
    )
    parser.add_argument("algorithm", help="bf, kr or lcss (a leading dash is accepted)")
    parser.add_argument("subject", help="file holding the dna sequence")
    parser.add_argument("other", help="file holding the pattern or the second dna sequence")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug details")
    return parser


def _undash(arg: str) -> str:
    # "-bf", "-rk", "--rabin-karp" would otherwise be read as options
    name = arg.lstrip("-")
    if arg.startswith("-") and name.lower() in MODE_NAMES:
        return name
    return arg


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    args = build_parser().parse_args([_undash(a) for a in argv])
    try:
        settings = load_settings()
        logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level)
        subject = read_sequence(args.subject)
        other = read_sequence(args.other)
        result = run(args.algorithm, subject, other, strict=True,
                     hash_mod=settings.hash_mod, max_cells=settings.max_table_cells)
    except (DnaMatchError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(result.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
