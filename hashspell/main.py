"""Entry point for hashspell.

Usage:
    hashspell                                   # prompts for the three paths
    hashspell -d dict.txt -i input.txt -o out.txt
    hashspell -d dict.txt -i input.txt -o - --auto-size --overflow grow
"""
import sys
import signal
import logging
import argparse
from contextlib import contextmanager
from typing import Optional, Sequence

from hashspell import __version__
from hashspell.checker import BatchSpellChecker
from hashspell.config import Config
from hashspell.report import ReportWriter
from hashspell.sizing import choose_table_size
from hashspell.sources import count_words, iter_words, read_words
from hashspell.table import OverflowPolicy, TableOverflowError

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hashspell",
        description="Report words in a text that are not in a dictionary word list.",
    )
    parser.add_argument("-d", "--dictionary", help="dictionary word list")
    parser.add_argument("-i", "--input", help="text to check")
    parser.add_argument("-o", "--output", help="report file, or - for stdout")
    size = parser.add_mutually_exclusive_group()
    size.add_argument("--table-size", type=int, help="number of hash buckets")
    size.add_argument("--auto-size", action="store_true", default=None,
                      help="size the table from the dictionary's word count")
    parser.add_argument("--target-probes", type=float,
                        help="expected probes per search used by --auto-size")
    parser.add_argument("--overflow", choices=[p.value for p in OverflowPolicy],
                        help="what to do when a probe run passes the end of the table")
    parser.add_argument("--jobs", type=int, help="threads used to check input words")
    parser.add_argument("--config", help="path to a JSON config file")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _prompt(value: Optional[str], question: str) -> str:
    if value:
        return value
    return input(question).strip()


@contextmanager
def _open_output(path: str):
    if path == "-":
        yield sys.stdout
        return
    with open(path, "w", encoding="utf-8") as f:
        yield f


def _table_size(args, config: Config, dictionary: str) -> int:
    if args.table_size is not None:
        if args.table_size < 1:
            raise ValueError(f"--table-size must be positive, got {args.table_size}")
        return args.table_size
    auto = args.auto_size if args.auto_size is not None else config.auto_size
    if auto:
        target = args.target_probes if args.target_probes is not None else config.target_probes
        words = count_words(dictionary)
        size = choose_table_size(words, target)
        logger.info("Auto-sized table: %d buckets for %d words (target %.2f probes)",
                    size, words, target)
        return size
    return config.table_size


def run(args) -> int:
    """Run one spell check. Returns the process exit status."""
    config = Config(args.config)
    setup_logging(args.debug or config.debug_logging)

    dictionary = _prompt(args.dictionary, "Dictionary list? ")
    input_path = _prompt(args.input, "Input file? ")
    output = _prompt(args.output, "Output file? ")

    try:
        overflow = OverflowPolicy.parse(args.overflow) if args.overflow else config.overflow
        jobs = args.jobs if args.jobs is not None else config.jobs
        checker = BatchSpellChecker(_table_size(args, config, dictionary), overflow=overflow)
        checker.build(read_words(dictionary))
        # input before output: a missing input must not create the report file
        with open(input_path, "r", encoding="utf-8") as source, _open_output(output) as out:
            writer = ReportWriter(out)
            writer.write_banner()
            writer.write_words(checker.misspelled(iter_words(source), jobs=jobs))
            writer.write_summary(checker.stats)
    except OSError as e:
        logger.error("Cannot open %s: %s", e.filename, e.strerror)
        return 1
    except TableOverflowError as e:
        logger.error("Dictionary does not fit: %s (try --auto-size or --overflow grow)", e)
        return 1
    except ValueError as e:
        logger.error("%s", e)
        return 1

    stats = checker.stats
    logger.info("Checked %d words: %d misspelled, %d probes in %d lookups",
                stats.words_examined, stats.misspelled_count,
                stats.probe_count, stats.lookup_count)
    return 0


def main(argv: Optional[Sequence[str]] = None):
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    args = build_parser().parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
