"""Encoding of words as letter-presence bitmasks, and construction of the candidate set."""

from collections.abc import Iterable

import numpy as np

from fivewords.errors import EncodingError

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
"""Supported alphabet. Bit `i` of a letter mask corresponds to `ALPHABET[i]`."""

LETTER_BITS = {ch: 1 << i for i, ch in enumerate(ALPHABET)}

WORD_LETTERS = 5
"""Number of distinct letters a word must have to be a candidate."""

MASK_DTYPE = np.uint32


def encode_word(word: str) -> int:
    """Encode a word as a letter-presence bitmask.

    Bit `i` is set iff the word contains `ALPHABET[i]` at least once, so repeated letters and
    anagrams collapse onto the same mask.

    Args:
        word: A word made of lowercase letters `a`-`z`.

    Returns:
        The letter mask of the word.

    Raises:
        EncodingError: If the word contains a character outside `ALPHABET`.
    """
    mask = 0
    for position, ch in enumerate(word):
        bit = LETTER_BITS.get(ch)
        if bit is None:
            raise EncodingError(word, ch, position)
        mask |= bit
    return mask


def popcount(mask: int) -> int:
    """Number of distinct letters in a letter mask."""
    return int(mask).bit_count()


def mask_to_letters(mask: int) -> str:
    """Return the letters present in a mask, in alphabetical order."""
    return "".join(ch for ch, bit in LETTER_BITS.items() if mask & bit)


def filter_candidates(words: Iterable[str], *, skip_invalid: bool = False) -> np.ndarray:
    """Build the candidate set from a word list.

    Every word is encoded, masks are deduplicated, and only masks with exactly `WORD_LETTERS`
    bits set are kept.  Deduplication is by mask value: which words produced a mask is not
    retained (see `fivewords.decoding`).

    Args:
        words: The raw word list.
        skip_invalid: If True, words that fail to encode are dropped.  Otherwise (default), the
            first such word aborts the whole filter.

    Returns:
        A read-only, ascending, duplicate-free array of masks (dtype `uint32`).

    Raises:
        EncodingError: If a word fails to encode and `skip_invalid` is False.
    """
    masks: set[int] = set()
    for word in words:
        try:
            mask = encode_word(word)
        except EncodingError:
            if skip_invalid:
                continue
            raise
        if popcount(mask) == WORD_LETTERS:
            masks.add(mask)

    candidates = np.array(sorted(masks), dtype=MASK_DTYPE)
    candidates.flags.writeable = False
    return candidates
