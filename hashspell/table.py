"""Open-addressing hash table with linear probing and no deletion."""
import enum
import logging
from typing import Callable, Iterator, List, Optional

from hashspell.hashing import polynomial_hash
from hashspell.sizing import next_prime
from hashspell.stats import RunStatistics

logger = logging.getLogger(__name__)

HashFunc = Callable[[str, int, Optional[int]], int]


class TableOverflowError(RuntimeError):
    """Raised when an insert cannot find a free slot under the active policy."""


class OverflowPolicy(enum.Enum):
    """What an insert does when its probe run passes the last slot.

    REJECT  raise TableOverflowError, leaving the table untouched.
    WRAP    continue probing from slot 0; overflow only when every slot is full.
    GROW    rehash everything into a table about twice the size, then insert.
    """
    REJECT = "reject"
    WRAP = "wrap"
    GROW = "grow"

    @classmethod
    def parse(cls, value) -> "OverflowPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ", ".join(p.value for p in cls)
            raise ValueError(f"unknown overflow policy {value!r} (expected one of: {names})") from None


class HashTable:
    """Fixed-size table of words, probed linearly from the hashed bucket.

    ``size`` is the number of buckets the hash function maps into. The slot
    array carries one spare slot past the last bucket so that the final
    bucket can take a single collision before the run reaches the end.
    """

    def __init__(self, size: int, hash_func: HashFunc = polynomial_hash,
                 overflow=OverflowPolicy.REJECT):
        if size < 1:
            raise ValueError(f"table size must be positive, got {size}")
        self._size = size
        self._hash = hash_func
        self._overflow = OverflowPolicy.parse(overflow)
        self._slots: List[Optional[str]] = [None] * (size + 1)
        self._count = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def overflow(self) -> OverflowPolicy:
        return self._overflow

    @property
    def load_factor(self) -> float:
        return self._count / self._size

    def __len__(self) -> int:
        return self._count

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and self.lookup(word)

    def __iter__(self) -> Iterator[str]:
        return (w for w in self._slots if w is not None)

    def slot_of(self, word: str) -> Optional[int]:
        """Slot index holding ``word``, or None. Does not touch statistics."""
        for index in self._probe_sequence(self._hash(word, self._size, None)):
            stored = self._slots[index]
            if stored is None:
                return None
            if stored == word:
                return index
        return None

    def insert(self, word: str) -> int:
        """Place ``word`` in the first free slot at or after its bucket.

        Returns the slot index used.
        """
        home = self._hash(word, self._size, None)
        for index in self._probe_sequence(home):
            if self._slots[index] is None:
                self._slots[index] = word
                self._count += 1
                return index

        if self._overflow is OverflowPolicy.GROW:
            self._grow()
            return self.insert(word)
        if self._overflow is OverflowPolicy.WRAP:
            raise TableOverflowError(f"table is full ({self._count} words in {self.capacity} slots)")
        raise TableOverflowError(
            f"probe run for {word!r} from bucket {home} passed the end of the table "
            f"({self._count} words in {self.capacity} slots)"
        )

    def lookup(self, word: str, end: Optional[int] = None,
               stats: Optional[RunStatistics] = None) -> bool:
        """Return True if ``word[:end]`` is stored.

        Every occupied slot that does not match adds one probe to ``stats``,
        so a hit in the home bucket costs nothing.
        """
        if end is None:
            end = len(word)
        probes = 0
        found = False
        for index in self._probe_sequence(self._hash(word, self._size, end)):
            stored = self._slots[index]
            if stored is None:
                break
            if len(stored) == end and word.startswith(stored):
                found = True
                break
            probes += 1
        if stats is not None:
            stats.probe_count += probes
        return found

    def _probe_sequence(self, home: int) -> Iterator[int]:
        capacity = len(self._slots)
        yield from range(home, capacity)
        if self._overflow is OverflowPolicy.WRAP:
            yield from range(0, home)

    def _grow(self):
        new_size = next_prime(self._size * 2)
        logger.debug("Growing table from %d to %d buckets (%d words)",
                     self._size, new_size, self._count)
        old_words = [w for w in self._slots if w is not None]
        self._size = new_size
        self._slots = [None] * (new_size + 1)
        self._count = 0
        for w in old_words:
            self.insert(w)
