"""
Errors
======
Every failure the wheel cipher can report is a caller-input violation:
nothing is retried, nothing is partially written.

All errors derive from ValueError so code that already guards bad
input with `except ValueError` keeps working.
"""


class JeffersonDiskError(ValueError):
    """Base class for wheel cipher errors."""
    pass


class InvalidMessage(JeffersonDiskError):
    """Message holds a symbol outside the disk alphabet."""

    def __init__(self, content: str, alphabet: str):
        self.content  = content
        self.alphabet = alphabet
        super().__init__(f"'message' must contain only {alphabet}, got {content!r}.")


class InvalidRow(JeffersonDiskError):
    """Requested row is reserved (1) or outside the device."""

    def __init__(self, row, low: int, high: int):
        self.row = row
        super().__init__(f"'row' must be between {low} and {high}, got {row!r}.")


class InvalidKey(JeffersonDiskError):
    """Key is not a permutation of the disk identities (or disks are malformed)."""

    def __init__(self, key, reason: str):
        self.key = key
        super().__init__(f"Invalid key {key!r}: {reason}.")


class KeySheetError(JeffersonDiskError):
    """Key sheet is malformed or its fingerprint does not match."""
    pass
