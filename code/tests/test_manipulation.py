import pytest

from seguidkit.core.errors import EmptySequenceError
from seguidkit.core.manipulation import (
    assert_ascii_ordering,
    circular_duplex_form,
    dihedral_duplex_form,
    min_rotation,
    reverse_complement_dna,
    rotate,
    rotate_to_min,
)
from seguidkit.core.types import StrandPair


@pytest.mark.parametrize("seq,amount,expected", [
    ("ACGT", 0, "ACGT"),
    ("ACGT", 1, "CGTA"),
    ("ACGT", -1, "TACG"),
    ("ACGT", 4, "ACGT"),
    ("ACGT", 6, "GTAC"),
    ("", 3, ""),
])
def test_rotate(seq, amount, expected):
    assert rotate(seq, amount) == expected


@pytest.mark.parametrize("seq,offset", [
    ("ACGT", 0),
    ("GTAC", 2),
    ("Aa", 0),
])
def test_min_rotation(seq, offset):
    assert min_rotation(seq) == offset


def test_min_rotation_of_periodic_sequence_may_be_negative():
    assert min_rotation("CACA") == -1
    assert rotate_to_min("CACA") == "ACAC"


def test_rotate_to_min_is_rotation_invariant():
    seq = "GATTACA"
    results = {rotate_to_min(rotate(seq, k)) for k in range(len(seq))}
    assert results == {"ACAGATT"}


def test_ascii_ordering_holds():
    assert_ascii_ordering()


def test_reverse_complement_dna():
    assert reverse_complement_dna("aacg") == "CGTT"
    assert reverse_complement_dna("ACNGT") == "ACGT"


def test_reverse_complement_dna_needs_a_base():
    with pytest.raises(EmptySequenceError):
        reverse_complement_dna("NNN")


def test_circular_duplex_form():
    assert circular_duplex_form("GTATGCC", "GGCATAC") == StrandPair("ACGGCAT", "ATGCCGT")


def test_circular_duplex_form_depends_on_strand_labels():
    assert circular_duplex_form("TGA", "TCA") == StrandPair("ATC", "GAT")
    assert circular_duplex_form("TCA", "TGA") == StrandPair("ATG", "CAT")


def test_canonical_pair_is_a_fixed_point():
    canonical = circular_duplex_form("GTATGCC", "GGCATAC")
    assert circular_duplex_form(canonical.watson, canonical.crick) == canonical


def test_dihedral_duplex_form_keeps_pair_length():
    pair = dihedral_duplex_form("ACGTT", "AACGT")
    assert len(pair.watson) == len(pair.crick) == 5


def test_dihedral_duplex_form_can_pick_a_reversed_strand():
    # "AACGT..." wraps around the end of the reversed Crick segment
    assert dihedral_duplex_form("ACGT", "ACGT") == StrandPair("ATGC", "GCAT")


def test_dihedral_duplex_form_depends_on_reading_direction():
    assert dihedral_duplex_form("TGCA", "TGCA") == StrandPair("ACGT", "ACGT")


def test_negative_offset_of_periodic_join_stays_with_watson():
    # "TTA" + "TTTT" + "ATT" is "TTATT" twice
    assert min_rotation("TTATTTTATT") == -3
    assert circular_duplex_form("TTA", "ATT") == StrandPair("TTA", "ATT")
