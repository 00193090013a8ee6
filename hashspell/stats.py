"""Run statistics: counters gathered while building and querying the table."""
from dataclasses import dataclass


@dataclass
class RunStatistics:
    dictionary_count: int = 0   # words inserted into the table
    words_examined: int = 0     # input tokens checked
    misspelled_count: int = 0   # tokens with no dictionary match
    probe_count: int = 0        # non-matching slots compared during lookups
    lookup_count: int = 0       # resolver calls, recursive ones included

    @property
    def avg_probes_per_word(self) -> float:
        if self.words_examined == 0:
            return 0.0
        return self.probe_count / self.words_examined

    @property
    def avg_probes_per_lookup(self) -> float:
        if self.lookup_count == 0:
            return 0.0
        return self.probe_count / self.lookup_count

    def merge(self, other: "RunStatistics") -> "RunStatistics":
        """Add another run's counters into this one and return self."""
        self.dictionary_count += other.dictionary_count
        self.words_examined += other.words_examined
        self.misspelled_count += other.misspelled_count
        self.probe_count += other.probe_count
        self.lookup_count += other.lookup_count
        return self
