"""
Core interfaces for seguidkit.

These abstract base classes define the contract that the kind-specific
canonicalizers implement so the checksum engine can treat linear, circular,
single- and double-stranded sequences uniformly.

The same molecule presented in different ways (rotated, with strands
swapped, read in the other direction) must reduce to the same canonical
string; the engine only ever hashes that canonical string.
"""

from abc import ABC, abstractmethod
from typing import Any

from .alphabet import build_table
from .errors import SeguidValidationError
from .validator import assert_in_alphabet


class Canonicalizer(ABC):
    """
    Converts a sequence (or strand pair) to its canonical string.

    The canonical string is what gets hashed: two inputs that describe the
    same molecule under the canonicalizer's symmetry must produce the same
    string.

    Examples:
        - Linear single strand: the sequence itself
        - Circular single strand: the lexicographically smallest rotation
        - Linear double strand: "<smaller strand>;<larger strand>"

    Attributes:
        alphabet: Alphabet specification the input is checked against
    """

    alphabet: str = "{DNA}"

    @abstractmethod
    def canonicalize(self, obj: Any) -> str:
        """
        Convert object to canonical string representation.

        Args:
            obj: Sequence string or StrandPair (already preprocessed and
                validated)

        Returns:
            Canonical string (identical for equivalent inputs)
        """
        pass

    def preprocess(self, obj: Any) -> Any:
        """
        Optional normalization before validation and canonicalization.

        Override this if input needs cleaning first (e.g. the legacy v1
        protein checksum uppercases and strips unknown residues).
        """
        return obj

    def validate(self, obj: Any) -> None:
        """
        Structural checks on the preprocessed input.

        Raises:
            SeguidValidationError: If the input cannot be canonicalized
        """
        pass

    @property
    def digest_alphabet(self) -> str:
        """Alphabet the canonical string itself is drawn from."""
        return self.alphabet

    def is_valid(self, obj: Any) -> bool:
        """
        Check if ``obj`` would produce a checksum.

        Returns:
            True if preprocessing, validation, canonicalization and the
            alphabet check of the canonical string all succeed
        """
        try:
            obj = self.preprocess(obj)
            self.validate(obj)
            canonical = self.canonicalize(obj)
            assert_in_alphabet(canonical, build_table(self.digest_alphabet))
        except SeguidValidationError:
            return False
        return bool(canonical)
