"""
Disks
=====
The raw material of the device: a fixed 26-letter alphabet, the disks
cut from it, and the spindle key that orders them.

A disk is one rotatable ring carrying a shuffled copy of the alphabet.
Positions on a disk wrap around, so asking for the symbol 27 places
from the top lands on the second symbol again.

Generation consumes a single random source in a fixed order (every
disk first, then the key) so one seed always yields the same device.
"""

from typing import List, Sequence

ALPHABET        = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_LENGTH = len(ALPHABET)


class Disk:
    """One ring of the device: an immutable permutation of ALPHABET."""

    __slots__ = ("_symbols",)

    def __init__(self, symbols: str):
        if len(symbols) != ALPHABET_LENGTH or sorted(symbols) != list(ALPHABET):
            raise ValueError("Disk must be a permutation of the alphabet.")
        self._symbols = symbols

    def index(self, symbol: str) -> int:
        """Position of `symbol` on this disk (0-25)."""
        return self._symbols.index(symbol)

    def symbol_at(self, offset: int) -> str:
        """Symbol `offset` places from the top, wrapping circularly."""
        return self._symbols[offset % ALPHABET_LENGTH]

    def __len__(self):
        return ALPHABET_LENGTH

    def __iter__(self):
        return iter(self._symbols)

    def __eq__(self, other):
        if isinstance(other, Disk):
            return self._symbols == other._symbols
        return NotImplemented

    def __hash__(self):
        return hash(self._symbols)

    def __str__(self):
        return self._symbols

    def __repr__(self):
        return f"Disk({self._symbols!r})"


def validate_message(message: str) -> bool:
    """True if every symbol lies in [A, Z]. The empty message is valid."""
    first, last = ALPHABET[0], ALPHABET[-1]
    return all(first <= ch <= last for ch in message)


def generate_disks(count: int, rng) -> List[Disk]:
    """Shuffle a fresh copy of the alphabet for each of `count` disks."""
    disks = []
    for _ in range(count):
        symbols = list(ALPHABET)
        rng.shuffle(symbols)
        disks.append(Disk("".join(symbols)))
    return disks


def generate_key(count: int, rng) -> List[int]:
    """Random spindle order: a shuffled list of disk identities 0..count-1."""
    key = list(range(count))
    rng.shuffle(key)
    return key


def is_permutation(key: Sequence[int], count: int) -> bool:
    """True if `key` holds every identity in 0..count-1 exactly once."""
    try:
        if any(isinstance(k, bool) or not isinstance(k, int) for k in key):
            return False
        return len(key) == count and sorted(key) == list(range(count))
    except TypeError:
        return False
