from collections import Counter
from typing import Dict, Iterable, List, Mapping, Tuple


def count_frequencies(words: Iterable[str]) -> Dict[str, int]:
    # exact counts: sum(values) == number of words
    return dict(Counter(words))


def top_words(frequencies: Mapping[str, int], limit: int = 20) -> List[Tuple[str, int]]:
    """Most frequent (word, count) pairs; ties sorted alphabetically."""
    if limit <= 0:
        return []
    ranked = sorted(frequencies.items(), key=lambda kv: (-kv[1], kv[0]))
    return ranked[:limit]
