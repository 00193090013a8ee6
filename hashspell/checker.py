"""Batch spell checker: builds the table from a dictionary and checks tokens."""
import itertools
import logging
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Deque, Iterable, Iterator, List, Optional, Tuple

from hashspell.formatter import format_token
from hashspell.resolver import SpellResolver
from hashspell.sizing import DEFAULT_TABLE_SIZE, expected_probes
from hashspell.stats import RunStatistics
from hashspell.table import HashTable, OverflowPolicy

logger = logging.getLogger(__name__)

# Tokens in flight per worker thread when checking in parallel.
PENDING_PER_JOB = 4


@dataclass
class TokenResult:
    original: str    # token as read from the input
    formatted: str   # token after edge punctuation was trimmed
    correct: bool


class BatchSpellChecker:
    """Build phase then query phase over a single HashTable.

    All counters live in ``self.stats``. Nothing is shared at module level,
    so several checkers can run side by side.
    """

    def __init__(self, table_size: int = DEFAULT_TABLE_SIZE,
                 overflow=OverflowPolicy.REJECT, table: Optional[HashTable] = None):
        self.table = table if table is not None else HashTable(table_size, overflow=overflow)
        self.resolver = SpellResolver(self.table)
        self.stats = RunStatistics()

    def build(self, words: Iterable[str]) -> int:
        """Insert every dictionary word. Returns the number inserted."""
        added = 0
        for word in words:
            self.table.insert(word)
            added += 1
        self.stats.dictionary_count += added

        lf = self.table.load_factor
        if lf < 1.0:
            logger.info("Dictionary loaded: %d words in %d buckets (load factor %.3f, expected %.2f probes)",
                        len(self.table), self.table.size, lf, expected_probes(lf))
        else:
            logger.info("Dictionary loaded: %d words in %d buckets (load factor %.3f)",
                        len(self.table), self.table.size, lf)
        return added

    def check_word(self, word: str) -> bool:
        """Resolve an already-formatted word, counting its lookups and probes."""
        return self.resolver.check(word, self.stats)

    def check_token(self, raw: str) -> TokenResult:
        result, token_stats = self._resolve(raw)
        self._record(result, token_stats)
        return result

    def check_tokens(self, tokens: Iterable[str], jobs: int = 1) -> Iterator[TokenResult]:
        """Check tokens and yield results in input order.

        With ``jobs > 1`` tokens are resolved on a thread pool. Each token
        keeps its own counters, which are merged here in input order, so the
        totals match a sequential run exactly.
        """
        if jobs <= 1:
            for raw in tokens:
                yield self.check_token(raw)
            return

        window = jobs * PENDING_PER_JOB
        source = iter(tokens)
        pending: Deque[Future] = deque()
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            for raw in itertools.islice(source, window):
                pending.append(pool.submit(self._resolve, raw))
            while pending:
                result, token_stats = pending.popleft().result()
                for raw in itertools.islice(source, 1):
                    pending.append(pool.submit(self._resolve, raw))
                self._record(result, token_stats)
                yield result

    def misspelled(self, tokens: Iterable[str], jobs: int = 1) -> Iterator[str]:
        """Formatted text of each token that failed to resolve, in order."""
        for result in self.check_tokens(tokens, jobs=jobs):
            if not result.correct:
                yield result.formatted

    def _resolve(self, raw: str) -> Tuple[TokenResult, RunStatistics]:
        token_stats = RunStatistics(words_examined=1)
        formatted = format_token(raw)
        correct = self.resolver.check(formatted, token_stats)
        if not correct:
            token_stats.misspelled_count = 1
        return TokenResult(raw, formatted, correct), token_stats

    def _record(self, result: TokenResult, token_stats: RunStatistics):
        self.stats.merge(token_stats)
        if not result.correct:
            logger.debug("Misspelled: %r (from %r)", result.formatted, result.original)


def check_text(dictionary: Iterable[str], tokens: Iterable[str],
               table_size: int = DEFAULT_TABLE_SIZE) -> Tuple[List[str], RunStatistics]:
    """Convenience wrapper: build, check, and return (misspelled, stats)."""
    checker = BatchSpellChecker(table_size)
    checker.build(dictionary)
    missed = list(checker.misspelled(tokens))
    return missed, checker.stats
