"""Report output: banner, misspelled words and statistics summary."""
from typing import Iterable, TextIO

from hashspell.stats import RunStatistics

RULE = "=" * 45
BANNER = (
    RULE,
    "===== Misspelled/ Questionable Words: =======",
    RULE,
)


class ReportWriter:
    """Writes the spell-check report to a text stream in three sections."""

    def __init__(self, out: TextIO):
        self.out = out

    def _line(self, text: str = ""):
        self.out.write(text + "\n")

    def write_banner(self):
        for line in BANNER:
            self._line(line)

    def write_word(self, word: str):
        self._line(word)

    def write_words(self, words: Iterable[str]) -> int:
        written = 0
        for word in words:
            self.write_word(word)
            written += 1
        return written

    def write_summary(self, stats: RunStatistics):
        self._line(RULE)
        self._line(f"Number of words in dictionary: {stats.dictionary_count}")
        self._line(f"Number of words to be examined: {stats.words_examined}")
        self._line(f"Number of misspelled/ questionable words: {stats.misspelled_count}")
        self._line(RULE)
        self._line(f"Total number of probes: {stats.probe_count}")
        self._line(f"Average number of probes per word: {stats.avg_probes_per_word:.2f}")
        self._line(f"Average number of probes per lookup: {stats.avg_probes_per_lookup:.2f}")
        self._line(RULE)
