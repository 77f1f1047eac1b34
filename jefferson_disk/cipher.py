"""
Jefferson Disk — the wheel cipher engine
========================================
A set of alphabet disks threaded on a spindle in a secret order.

Encryption: turn each disk until the plaintext reads across one line,
then copy out any other line as the ciphertext.
Decryption: set the ciphertext on a line and read around the cylinder
until a line makes sense. The engine shows every line; it does not
guess which one is the plaintext.

Historical note: Thomas Jefferson, ~1795; reinvented by Bazeries (1891)
and fielded by the US Army as the M-94 (1922). Broken by de Viaris in
1893; a curiosity, not a safeguard.

Row numbering (1-based, as on the device):
  row 1     the plaintext line itself, never a valid choice
  rows 2-26 candidate ciphertext lines

Dependencies: cryptography >= 41.0 (fingerprint only)
"""

import logging
import random
import time
from typing import List, Optional, Sequence

from cryptography.hazmat.primitives import hashes

from .disks import (
    ALPHABET,
    ALPHABET_LENGTH,
    Disk,
    generate_disks,
    generate_key,
    is_permutation,
    validate_message,
)
from .errors import InvalidKey, InvalidMessage, InvalidRow

logger = logging.getLogger(__name__)


class DiskCipher:
    """
    Jefferson Disk with `disk_count` disks and a random spindle key.

    Everything random happens in the constructor: disks are shuffled
    first, then the key, from one generator seeded with `seed`. After
    that the engine never changes, so it is safe to share between threads.
    """

    DEFAULT_DISK_COUNT = 12
    MAX_DISK_COUNT     = 255
    DEFAULT_ROW        = 2
    FIRST_ROW          = 2                 # row 1 reproduces the plaintext
    LAST_ROW           = ALPHABET_LENGTH

    def __init__(self, disk_count: int = DEFAULT_DISK_COUNT, seed: int = None,
                 rng: random.Random = None):
        """
        Build a fresh device.

        seed defaults to the current time in nanoseconds and must be a
        non-negative integer. Pass `rng` instead to drive generation from
        your own source; it is used here and dropped, and seed() then
        returns None because no seed can rebuild that device.
        """
        self._check_disk_count(disk_count)
        if rng is not None:
            if seed is not None:
                raise ValueError("Pass either seed or rng, not both.")
        else:
            if seed is None:
                seed = time.time_ns()
            self._check_seed(seed)
            rng = random.Random(seed)

        self._seed  = seed
        self._disks = tuple(generate_disks(disk_count, rng))
        self._key   = tuple(generate_key(disk_count, rng))
        logger.info(f"DiskCipher: {disk_count} disks | seed={seed}")

    @classmethod
    def from_settings(cls, disks: Sequence[str], key: Sequence[int],
                      seed: int = None) -> "DiskCipher":
        """
        Rebuild a device from explicit disk contents and spindle key.
        The seed is informational only; without one, seed() returns None.
        """
        if seed is not None:
            cls._check_seed(seed)
        disks = list(disks)
        cls._check_disk_count(len(disks))
        try:
            parsed = [Disk(str(d)) for d in disks]
        except ValueError:
            raise InvalidKey(key, "every disk must be a permutation of " + ALPHABET)
        if not is_permutation(key, len(parsed)):
            raise InvalidKey(key, f"must be a permutation of 0..{len(parsed) - 1}")

        engine = cls.__new__(cls)
        engine._seed  = seed
        engine._disks = tuple(parsed)
        engine._key   = tuple(int(k) for k in key)
        logger.info(f"DiskCipher: {len(parsed)} disks | loaded from settings")
        return engine

    @classmethod
    def _check_disk_count(cls, disk_count):
        if isinstance(disk_count, bool) or not isinstance(disk_count, int):
            raise ValueError("disk_count must be an integer.")
        if not 1 <= disk_count <= cls.MAX_DISK_COUNT:
            raise ValueError(f"disk_count must be between 1 and {cls.MAX_DISK_COUNT}.")

    @staticmethod
    def _check_seed(seed):
        # Random() seeds on abs(seed), so negatives would alias positives
        if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
            raise ValueError("seed must be a non-negative integer.")

    # ── accessors ────────────────────────────────────────────────────────────
    def seed(self) -> Optional[int]:
        """Generator seed, or None when no seed rebuilds this device."""
        return self._seed

    @property
    def disk_count(self) -> int:
        return len(self._disks)

    @property
    def disk_set(self) -> tuple:
        """Disk contents in identity order (0..N-1)."""
        return tuple(str(d) for d in self._disks)

    def key(self) -> List[int]:
        """Spindle order as a new list; mutating it leaves the engine alone."""
        return list(self._key)

    def disks(self, with_key: bool = False) -> List[str]:
        """
        26 rows across all disks. Columns follow identity order, or
        spindle order when `with_key` is set.
        """
        order = self._key if with_key else range(self.disk_count)
        return ["".join(self._disks[d].symbol_at(r) for d in order)
                for r in range(ALPHABET_LENGTH)]

    def fingerprint(self) -> str:
        """SHA-256 over disks and key, for comparing two assembled devices."""
        digest = hashes.Hash(hashes.SHA256())
        for disk in self._disks:
            digest.update(str(disk).encode("ascii"))
        digest.update(bytes(self._key))
        return digest.finalize().hex()

    # ── mechanics ────────────────────────────────────────────────────────────
    def validate(self, message: str) -> bool:
        return validate_message(message)

    def compute_offsets(self, message: str, key: Sequence[int] = None) -> List[int]:
        """
        How far each spindle position turns so `message` reads on row 0.
        Positions past the end of the message stay at 0.
        """
        if not validate_message(message):
            raise InvalidMessage(message, ALPHABET)
        key = self._key if key is None else key
        offsets = []
        for i, disk_id in enumerate(key):
            moves = self._disks[disk_id].index(message[i]) if i < len(message) else 0
            offsets.append(moves)
        logger.debug(f"Offsets: {offsets}")
        return offsets

    def _read_row(self, key: Sequence[int], offsets: Sequence[int], step: int) -> str:
        return "".join(self._disks[d].symbol_at(o + step) for d, o in zip(key, offsets))

    def _rotated_view(self, offsets: Sequence[int]) -> List[str]:
        return [self._read_row(self._key, offsets, r) for r in range(ALPHABET_LENGTH)]

    # ── transforms ───────────────────────────────────────────────────────────
    def encrypt(self, message: str, row: int = DEFAULT_ROW) -> str:
        """
        Align `message` on the device and return the line at `row` (2-26).

        Output is always disk_count letters long. A short message leaves
        the remaining disks at home; only the first disk_count letters of
        a long one are used, so chunk longer text yourself.
        """
        if not validate_message(message):
            raise InvalidMessage(message, ALPHABET)
        if (isinstance(row, bool) or not isinstance(row, int)
                or not self.FIRST_ROW <= row <= self.LAST_ROW):
            raise InvalidRow(row, self.FIRST_ROW, self.LAST_ROW)

        offsets = self.compute_offsets(message)
        ciphertext = self._rotated_view(offsets)[row - 1]
        logger.debug(f"Encrypt: {len(message)} symbols -> row {row}")
        return ciphertext

    def decrypt(self, key: Sequence[int], ciphertext: str) -> List[str]:
        """
        Set `ciphertext` on the device (spindle order `key`, or the
        engine's own key when None) and return all 26 lines.

        Line r is what encryption would have shown at row r + 1, so the
        plaintext of encrypt(m, row=R) sits at index R - 1. Line 0 is the
        ciphertext itself.
        """
        if key is None:
            key = self._key
        elif not is_permutation(key, self.disk_count):
            raise InvalidKey(key, f"must be a permutation of 0..{self.disk_count - 1}")
        if not validate_message(ciphertext):
            raise InvalidMessage(ciphertext, ALPHABET)

        offsets = self.compute_offsets(ciphertext, key)
        grid = [self._read_row(key, offsets, -r) for r in range(ALPHABET_LENGTH)]
        logger.debug(f"Decrypt: {len(ciphertext)} symbols -> {len(grid)} rows")
        return grid

    def __repr__(self):
        return f"DiskCipher(disk_count={self.disk_count}, seed={self._seed})"
