"""
String algorithms behind canonical sequence forms.

Rotation, reversal, DNA reverse complement and a linear-time minimal
rotation (Lyndon factorization over the doubled string). The duplex helpers
at the bottom pick one canonical strand pair out of all rotations and
strand labelings of a circular double-stranded molecule.
"""

import logging
from typing import List, Sequence

from .errors import EmptySequenceError, InternalConsistencyError
from .types import StrandPair

logger = logging.getLogger(__name__)

# Separator placed between strands before taking the minimal rotation of a
# circular duplex. Part of the checksum definition: never change it.
CIRCULAR_CONNECTOR = "TTTT"

_DNA_COMPLEMENT = str.maketrans("ACGT", "TGCA")
_DNA_BASES = frozenset("ACGT")


def rotate(seq: str, amount: int = 0) -> str:
    """
    Rotate ``seq`` to the left by ``amount`` positions.

    Args:
        seq: Sequence to rotate
        amount: Rotation amount; negative values rotate right

    Returns:
        Rotated sequence

    Example:
        >>> rotate("ACGT", 1)
        'CGTA'
        >>> rotate("ACGT", -1)
        'TACG'
    """
    if not seq:
        return seq
    amount %= len(seq)
    if amount:
        return seq[amount:] + seq[:amount]
    return seq


def reverse(seq: str) -> str:
    return seq[::-1]


def reverse_complement_dna(seq: str) -> str:
    """
    Reverse complement of a DNA sequence.

    The input is uppercased and everything outside ACGT is dropped before
    complementing.

    Raises:
        EmptySequenceError: If no A/C/G/T symbol remains

    Example:
        >>> reverse_complement_dna("aacg")
        'CGTT'
    """
    cleaned = "".join(base for base in seq.upper() if base in _DNA_BASES)
    if not cleaned:
        raise EmptySequenceError("A DNA sequence must contain at least one of A, C, G, T")
    return cleaned.translate(_DNA_COMPLEMENT)[::-1]


def min_rotation(seq: str) -> int:
    """
    Offset of the lexicographically smallest rotation of ``seq``.

    Runs in linear time by factorizing ``seq + seq`` into Lyndon words and
    stopping once whole repeats of a word cover the sequence length.
    Characters are compared by code point, so uppercase sorts before
    lowercase.

    For periodic input the returned offset can fall outside
    ``[0, len(seq))``; every equivalent offset yields the same rotation and
    ``rotate`` normalizes it.

    Example:
        >>> min_rotation("GTAC")
        2
    """
    doubled = seq + seq
    length = len(seq)
    total = len(doubled)
    k = old = 0
    word = ""
    repeats = 0

    while k < total:
        i, j = k, k + 1
        while j < total and doubled[i] <= doubled[j]:
            i = i + 1 if doubled[i] == doubled[j] else k
            j += 1

        while k < i + 1:
            k += j - i
            previous = word
            word = doubled[old:k]
            old = k
            repeats = repeats + 1 if word == previous else 1
            if len(word) * repeats == length:
                return old - i

    return 0


def assert_ascii_ordering() -> None:
    """Fail if uppercase letters do not sort before lowercase ones."""
    if min_rotation("Aa") != 0:
        raise InternalConsistencyError("ASCII ordering assumption violated")


def rotate_to_min(seq: str) -> str:
    """
    Rotate ``seq`` to its lexicographically smallest rotation.

    Example:
        >>> rotate_to_min("GTAC")
        'ACGT'
    """
    assert_ascii_ordering()
    return rotate(seq, min_rotation(seq))


def _minimal_pair(candidates: Sequence[StrandPair]) -> StrandPair:
    """
    Pick the candidate whose Watson rotation starts the minimal rotation.

    The Watson strands of all candidates are joined with the connector; the
    minimal rotation of that string lands inside one of them (earlier
    candidates win ties). That Watson is rotated to the offset and its Crick
    is rotated the opposite way so the antiparallel pairing is preserved.
    """
    segments: List[str] = [pair.watson for pair in candidates]
    concatenated = CIRCULAR_CONNECTOR.join(segments)
    # A negative offset (periodic joined string) stays with the first
    # candidate; rotate() normalizes the shift.
    offset = min_rotation(concatenated)

    base = 0
    for index, pair in enumerate(candidates):
        end = base + len(pair.watson)
        if offset < end or index == len(candidates) - 1:
            shift = offset - base
            logger.debug(
                f"Minimal rotation {offset} of {len(concatenated)}: segment {index}, shift {shift}"
            )
            return StrandPair(
                rotate(pair.watson, shift),
                rotate(pair.crick, len(pair.crick) - shift),
            )
        base = end + len(CIRCULAR_CONNECTOR)

    raise InternalConsistencyError("No candidate strand pair to rotate")


def circular_duplex_form(watson: str, crick: str) -> StrandPair:
    """
    Canonical strand pair of a circular double-stranded molecule.

    The origin is the minimal rotation of ``watson + "TTTT" + crick``; the
    strand it falls in becomes Watson. The connector is part of the
    checksum definition. Because the minimal rotation can run across the
    connector, the result depends on which strand is given as Watson and on
    the starting point: ("TGA", "TCA") gives ATC/GAT while ("TCA", "TGA")
    gives ATG/CAT.

    Example:
        >>> circular_duplex_form("GTATGCC", "GGCATAC")
        StrandPair(watson='ACGGCAT', crick='ATGCCGT')
    """
    pair = StrandPair(watson, crick)
    return _minimal_pair([pair, pair.swapped()])


def dihedral_duplex_form(watson: str, crick: str) -> StrandPair:
    """
    Circular duplex form that also considers both strands read backwards.

    Extends ``circular_duplex_form`` with the reversed strands, evaluated in
    the fixed order Watson, Crick, reversed Watson, reversed Crick. The same
    connector caveat applies, so the result is not invariant under strand
    swap or reversal in general: ("ACGT", "ACGT") gives ATGC/GCAT while its
    reversal ("TGCA", "TGCA") gives ACGT/ACGT.
    """
    pair = StrandPair(watson, crick)
    flipped = pair.reversed()
    return _minimal_pair([pair, pair.swapped(), flipped, flipped.swapped()])
