"""Table sizing from the expected-probes formula for linear probing.

For a load factor λ = words / buckets the expected number of probes of a
successful search is U(λ) = (1 + 1/(1-λ)^2) / 2. Solving for λ at a target
U gives the largest load factor that keeps searches near that target; the
table size is the first prime that keeps λ at or below it.
"""
import math

DEFAULT_TABLE_SIZE = 45491
DEFAULT_TARGET_PROBES = 3.0


def expected_probes(load_factor: float) -> float:
    if not 0.0 <= load_factor < 1.0:
        raise ValueError(f"load factor must be in [0, 1), got {load_factor}")
    return (1.0 + 1.0 / (1.0 - load_factor) ** 2) / 2.0


def load_factor_for(target_probes: float) -> float:
    """Inverse of expected_probes()."""
    if target_probes <= 1.0:
        raise ValueError(f"target probes must be greater than 1, got {target_probes}")
    return 1.0 - 1.0 / math.sqrt(2.0 * target_probes - 1.0)


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def next_prime(n: int) -> int:
    """Smallest prime >= n."""
    candidate = max(n, 2)
    while not is_prime(candidate):
        candidate += 1
    return candidate


def choose_table_size(word_count: int, target_probes: float = DEFAULT_TARGET_PROBES) -> int:
    """Prime bucket count for ``word_count`` words at ``target_probes``.

    25144 words at the default target of 3 probes gives 45491.
    """
    if word_count < 0:
        raise ValueError(f"word count must be non-negative, got {word_count}")
    minimum = math.ceil(word_count / load_factor_for(target_probes))
    return next_prime(max(minimum, 2))
