"""Spell-check resolver: dictionary lookup with recursive suffix stripping."""
from typing import Optional

from hashspell.stats import RunStatistics
from hashspell.table import HashTable

# Endings that may hide a dictionary stem, tried in this order.
ING = "ing"
TWO_CHAR_ENDINGS = ("ly", "'s")
ONE_CHAR_ENDINGS = ("s", "d", "r")


class SpellResolver:
    """Checks words against a HashTable, retrying with reduced forms.

    On a miss one reduction is applied and the shorter form is checked
    again:

    1. a capitalised word is lowercased (sentence-initial capitals);
    2. ``-ing`` is stripped from words longer than three characters;
    3. ``-ly`` or ``-'s`` is stripped;
    4. a final ``s``, ``d`` or ``r`` is stripped, and if that form misses
       and now ends in ``e`` the ``e`` goes too (``-es``, ``-ed``, ``-er``).

    This is a heuristic and not a stemmer. "families" is rejected when only
    "family" is in the dictionary, and some non-words are accepted because a
    stripped form happens to be present.

    Reductions are tracked as an end offset into the word rather than by
    slicing, so recursion does not build a new string per step.
    """

    def __init__(self, table: HashTable):
        self.table = table

    def check(self, word: str, stats: Optional[RunStatistics] = None) -> bool:
        """Return True if ``word`` or one of its reduced forms is in the table."""
        if stats is None:
            stats = RunStatistics()
        return self._check(word, len(word), stats)

    def _check(self, word: str, end: int, stats: RunStatistics) -> bool:
        stats.lookup_count += 1
        if self.table.lookup(word, end, stats):
            return True
        if end == 0:
            return False

        if word[0].isupper():
            folded = word[:end].lower()
            if folded != word[:end]:
                return self._check(folded, len(folded), stats)

        if end > 3 and word.endswith(ING, 0, end):
            return self._check(word, end - 3, stats)

        if end >= 2 and word.endswith(TWO_CHAR_ENDINGS, 0, end):
            return self._check(word, end - 2, stats)

        if word[end - 1] in ONE_CHAR_ENDINGS:
            end -= 1
            found = self._check(word, end, stats)
            if not found and end > 0 and word[end - 1] == "e":
                found = self._check(word, end - 1, stats)
            return found

        return False
