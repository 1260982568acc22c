"""
Canonicalizers for double-stranded sequences.

A double-stranded molecule is given as a Watson/Crick pair. Its canonical
string is "<first strand>;<second strand>", where the first strand is the
lexicographically smaller one, so swapping the strand labels never changes
the ldseguid checksum. The circular variants first rotate the pair to the
minimal rotation of the strands joined by "TTTT"; that origin may depend on
which strand is Watson.
"""

import logging
from typing import Any, Tuple, Union

from seguidkit.core.alphabet import build_table
from seguidkit.core.errors import (
    EmptySequenceError,
    LengthMismatchError,
    SingleStrandedAlphabetError,
)
from seguidkit.core.interfaces import Canonicalizer
from seguidkit.core.manipulation import (
    circular_duplex_form,
    dihedral_duplex_form,
    reverse_complement_dna,
)
from seguidkit.core.types import StrandPair
from seguidkit.core.validator import assert_complementary

logger = logging.getLogger(__name__)

PairLike = Union[StrandPair, Tuple[str, str]]


class LinearDuplexCanonicalizer(Canonicalizer):
    """
    Linear double strand (ldseguid).

    Examples:
        >>> canon = LinearDuplexCanonicalizer()
        >>> canon.canonicalize(StrandPair("TATGCC", "GGCATA"))
        'GGCATA;TATGCC'
        >>> canon.is_valid(("ACGT", "ACGA"))
        False
    """

    SEPARATOR = ";"
    # Gap and strand separator become part of the hashed string
    ALPHABET_EXTENSION = ",--,;;"

    def __init__(self, alphabet: str = "{DNA}"):
        """
        Args:
            alphabet: Alphabet specification with complementary pairs
        """
        self.alphabet = alphabet

    @property
    def digest_alphabet(self) -> str:
        return self.alphabet + self.ALPHABET_EXTENSION

    def preprocess(self, pair: PairLike) -> StrandPair:
        if isinstance(pair, StrandPair):
            return pair
        watson, crick = pair
        return StrandPair(watson, crick)

    def validate(self, pair: StrandPair) -> None:
        """
        Raises:
            EmptySequenceError: If either strand is empty
            LengthMismatchError: If the strands differ in length
            SingleStrandedAlphabetError: If the alphabet does not pair symbols
            NonComplementaryPairError: If the strands do not pair
        """
        if not pair.watson:
            raise EmptySequenceError("Watson sequence must not be empty")
        if not pair.crick:
            raise EmptySequenceError("Crick sequence must not be empty")
        if len(pair.watson) != len(pair.crick):
            raise LengthMismatchError(
                len(pair.watson), len(pair.crick),
                message=f"Sequences must be equal length ({len(pair.watson)} != {len(pair.crick)})"
            )

        assert_complementary(pair.watson, pair.crick, self.alphabet)

        if len(build_table(self.alphabet)) <= 1:
            raise SingleStrandedAlphabetError()

    def canonicalize(self, pair: StrandPair) -> str:
        watson, crick = pair.watson, pair.crick
        if watson < crick:
            return f"{watson}{self.SEPARATOR}{crick}"
        return f"{crick}{self.SEPARATOR}{watson}"


class CircularDuplexCanonicalizer(LinearDuplexCanonicalizer):
    """
    Circular double strand (cdseguid).

    The pair is rotated to the origin given by the minimal rotation of
    ``watson + "TTTT" + crick`` and then encoded like a linear duplex.

    Examples:
        >>> canon = CircularDuplexCanonicalizer()
        >>> canon.canonicalize(StrandPair("GTATGCC", "GGCATAC"))
        'ACGGCAT;ATGCCGT'
        >>> canon.canonicalize(StrandPair("TGA", "TCA"))
        'ATC;GAT'
        >>> canon.canonicalize(StrandPair("TCA", "TGA"))
        'ATG;CAT'
    """

    def canonical_pair(self, pair: StrandPair) -> StrandPair:
        return circular_duplex_form(pair.watson, pair.crick)

    def canonicalize(self, pair: StrandPair) -> str:
        rotated = self.canonical_pair(pair)
        logger.debug(f"Circular duplex of length {len(pair)} rotated to {rotated.watson[:12]}...")
        return super().canonicalize(rotated)


class DihedralDuplexCanonicalizer(CircularDuplexCanonicalizer):
    """
    Circular double strand over both reading directions (ccseguid).

    The reversed strands are added as two more candidate pairs when picking
    the rotation origin, and they must pair as well.

    A bare Watson string is accepted too: it is uppercased and its Crick is
    derived as the DNA reverse complement.

    Examples:
        >>> canon = DihedralDuplexCanonicalizer()
        >>> canon.preprocess("acgtt")
        StrandPair(watson='ACGTT', crick='AACGT')
    """

    def preprocess(self, pair: Any) -> StrandPair:
        if isinstance(pair, str):
            watson = pair.upper()
            return StrandPair(watson, reverse_complement_dna(watson))
        return super().preprocess(pair)

    def validate(self, pair: StrandPair) -> None:
        super().validate(pair)
        flipped = pair.reversed()
        assert_complementary(flipped.watson, flipped.crick, self.alphabet)

    def canonical_pair(self, pair: StrandPair) -> StrandPair:
        return dihedral_duplex_form(pair.watson, pair.crick)
