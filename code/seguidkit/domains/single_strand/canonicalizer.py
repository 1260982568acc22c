"""
Canonicalizers for single-stranded sequences.

Implements the canonical forms behind the seguid, lsseguid, csseguid and
legacy v1 protein checksums.
"""

import re
from typing import Any

from seguidkit.core.errors import EmptySequenceError
from seguidkit.core.interfaces import Canonicalizer
from seguidkit.core.manipulation import rotate_to_min


class LinearSequenceCanonicalizer(Canonicalizer):
    """
    Linear single strand: the sequence is its own canonical form.

    Case is significant and nothing is stripped; symbols outside the
    alphabet are rejected when the canonical string is hashed.

    Examples:
        >>> canon = LinearSequenceCanonicalizer()
        >>> canon.canonicalize("ACGT")
        'ACGT'

        >>> canon.is_valid("ACGU")
        False
    """

    def __init__(self, alphabet: str = "{DNA}"):
        """
        Args:
            alphabet: Alphabet specification (e.g. "{DNA}", "{RNA}", "AT,CG")
        """
        self.alphabet = alphabet

    def validate(self, sequence: Any) -> None:
        if not sequence:
            raise EmptySequenceError()

    def canonicalize(self, sequence: str) -> str:
        return sequence


class CircularSequenceCanonicalizer(LinearSequenceCanonicalizer):
    """
    Circular single strand: the lexicographically smallest rotation.

    Examples:
        >>> canon = CircularSequenceCanonicalizer()
        >>> canon.canonicalize("GTAC")
        'ACGT'
        >>> canon.canonicalize("TACG") == canon.canonicalize("CGTA")
        True
    """

    def canonicalize(self, sequence: str) -> str:
        return rotate_to_min(sequence)


class ProteinV1Canonicalizer(Canonicalizer):
    """
    Legacy SEGUID v1 protein canonicalizer.

    Unlike the other canonicalizers this one is tolerant: the sequence is
    uppercased and every character outside the 20 canonical amino acids is
    silently removed (ambiguity codes, stop symbols, gaps, whitespace,
    digits, punctuation).

    Canonicalization strategy:
        1. Reject empty input
        2. Convert to uppercase
        3. Remove everything except ACDEFGHIKLMNPQRSTVWY
        4. Reject if nothing is left

    Examples:
        >>> canon = ProteinV1Canonicalizer()
        >>> canon.preprocess("mgdr sEGP-B*")
        'MGDRSEGP'
    """

    # Standard 20 amino acids
    VALID_AA = "ACDEFGHIKLMNPQRSTVWY"

    _STRIP = re.compile(f"[^{VALID_AA}]")

    def __init__(self, alphabet: str = "{proteinV1}"):
        self.alphabet = alphabet

    def preprocess(self, sequence: Any) -> str:
        """
        Uppercase and strip non-canonical residues.

        Raises:
            EmptySequenceError: If the raw input is empty
        """
        if not sequence:
            raise EmptySequenceError()
        if not isinstance(sequence, str):
            sequence = str(sequence)
        return self._STRIP.sub("", sequence.upper())

    def validate(self, sequence: str) -> None:
        if not sequence:
            raise EmptySequenceError("A protein sequence must not be empty")

    def canonicalize(self, sequence: str) -> str:
        return sequence
