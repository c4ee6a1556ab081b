"""Word Reconstruction — rebuild a word from a letter → positions mapping.

Invariants:
    - Output is the letters ordered by ascending position
    - Positions are assumed contiguous and 0-based; this is NOT checked

Known limitations (kept as-is):
    - Gaps in the positions are skipped, so the word silently shrinks
    - A position claimed by two letters keeps the letter seen last
"""

from object_tasks.core.domain_types import LetterPositions


def make_word(letters: LetterPositions) -> str:
    """Place every letter at each of its positions and join in index order.

    >>> make_word({"a": [0, 1], "b": [2, 3], "c": [4, 5]})
    'aabbcc'
    """
    placed: dict[int, str] = {}
    for letter, positions in letters.items():
        for index in positions:
            placed[index] = letter
    return "".join(placed[index] for index in sorted(placed))
