import logging
import re

import pytest

import seguidkit
from seguidkit.core import checksum_engine
from seguidkit.core.checksum_engine import (
    ChecksumEngine,
    ChecksumKind,
    compute_digest,
    format_checksum,
)
from seguidkit.core.errors import (
    EmptySequenceError,
    ErrorKind,
    InternalConsistencyError,
    InvalidAlphabetSpecError,
    InvalidFormError,
    LengthMismatchError,
    NonComplementaryPairError,
    SequenceSyntaxError,
    SingleStrandedAlphabetError,
    UnknownChecksumTypeError,
    UnknownSymbolError,
)
from seguidkit.core.types import StrandPair

ENCODED = re.compile(r"[A-Za-z0-9+/_-]{27}")
SHORT = re.compile(r"[A-Za-z0-9+/_-]{6}")


def _digest(checksum):
    return checksum.split("=", 1)[1]


# ----------------------------------------------------------------------
# Known vectors
# ----------------------------------------------------------------------

def test_seguid_known_vector(engine):
    assert engine.seguid("AT") == "seguid=Ax/RG6hzSrMEEWoCO1IWMGska+4"


def test_lsseguid_is_url_safe_variant(engine):
    assert engine.lsseguid("AT") == "lsseguid=Ax_RG6hzSrMEEWoCO1IWMGska-4"


@pytest.mark.parametrize("seq,expected", [
    ("ACDEFGHIKLMNPQRSTVWY", "seguidv1=tRntFmqHM23Z+bMbNDfKXFC1+Es"),
    ("MGDRSEGPGPTRPGPPGIGP", "seguidv1=N/DxuiQwt3rU+nDzU5/q+CaRuQM"),
])
def test_seguidv1_known_vectors(engine, seq, expected):
    assert engine.seguidv1(seq) == expected


@pytest.mark.parametrize("seq", [
    "MGDRSEGPGPTRPGPPGIGP",
    "mgDRSEGpgpTRPGPPGigp",
    "MGDRSEGPGPTRPGPPGIGPB",
    "MGDRSEGPGPTRPGPPGIGPO",
    "12_*!@#$%^&MGDRSEGP GPTRPGPP  -GIGPO",
])
def test_seguidv1urlsafe_ignores_case_and_junk(engine, seq):
    assert engine.seguidv1urlsafe(seq) == "seguidv1urlsafe=N_DxuiQwt3rU-nDzU5_q-CaRuQM"


def test_seguidv1urlsafe_standard_vector(engine):
    assert engine.seguidv1urlsafe("ACDEFGHIKLMNPQRSTVWY") == "seguidv1urlsafe=tRntFmqHM23Z-bMbNDfKXFC1-Es"


# ----------------------------------------------------------------------
# Formats and encodings
# ----------------------------------------------------------------------

@pytest.mark.parametrize("form,expected", [
    ("long", "seguid=Ax/RG6hzSrMEEWoCO1IWMGska+4"),
    ("short", "Ax/RG6"),
    ("both", "Ax/RG6,seguid=Ax/RG6hzSrMEEWoCO1IWMGska+4"),
    ("SHORT", "Ax/RG6"),
])
def test_forms(engine, form, expected):
    assert engine.seguid("AT", form=form) == expected


def test_invalid_form(engine):
    with pytest.raises(InvalidFormError) as exc:
        engine.seguid("AT", form="invalid")
    assert str(exc.value) == "Invalid form: invalid"


def test_invalid_form_is_checked_before_the_sequence(engine):
    with pytest.raises(InvalidFormError):
        engine.seguid("", form="medium")


def test_standard_and_url_safe_encodings_differ_only_in_two_characters(engine):
    seq = "A" * 30
    standard = _digest(engine.seguid(seq))
    url_safe = _digest(engine.lsseguid(seq))
    assert standard.replace("+", "-").replace("/", "_") == url_safe
    assert "+" not in url_safe and "/" not in url_safe


@pytest.mark.parametrize("method,args", [
    ("seguid", ("ACGT",)),
    ("lsseguid", ("ACGT",)),
    ("csseguid", ("ACGT",)),
    ("ldseguid", ("-TATGCC", "-GCATAC")),
    ("cdseguid", ("GTATGCC", "GGCATAC")),
    ("ccseguid", ("GTATGCC",)),
    ("seguidv1", ("ACDEFGHIKLMNPQRSTVXY",)),
    ("seguidv1urlsafe", ("ACDEFGHIKLMNPQRSTVXY",)),
])
def test_every_kind_produces_a_27_character_digest(engine, method, args):
    long_form = getattr(engine, method)(*args)
    prefix, encoded = long_form.split("=", 1)
    assert prefix == method
    assert ENCODED.fullmatch(encoded)
    assert SHORT.fullmatch(getattr(engine, method)(*args, form="short"))


def test_compute_digest_and_format_checksum():
    encoded = compute_digest("AT", "{DNA}", url_safe=False)
    assert encoded == "Ax/RG6hzSrMEEWoCO1IWMGska+4"
    assert format_checksum("seguid=", encoded, "both") == "Ax/RG6,seguid=" + encoded


def test_long_sequence(engine):
    assert engine.lsseguid("A" * 1000).startswith("lsseguid=")


# ----------------------------------------------------------------------
# Canonicalization
# ----------------------------------------------------------------------

def test_csseguid_is_rotation_invariant(engine):
    assert engine.csseguid("ACGT") == engine.csseguid("GTAC")
    assert _digest(engine.csseguid("GTAC")) == _digest(engine.lsseguid("ACGT"))


def test_ldseguid_ignores_strand_labels(engine):
    assert engine.ldseguid("-TATGCC", "-GCATAC") == engine.ldseguid("-GCATAC", "-TATGCC")


def test_cdseguid_can_depend_on_strand_labels(engine):
    assert _digest(engine.cdseguid("TGA", "TCA")) == _digest(engine.ldseguid("ATC", "GAT"))
    assert _digest(engine.cdseguid("TCA", "TGA")) == _digest(engine.ldseguid("ATG", "CAT"))
    assert engine.cdseguid("TGA", "TCA") != engine.cdseguid("TCA", "TGA")


def test_cdseguid_hashes_the_canonical_linear_duplex(engine):
    circular = engine.cdseguid("GTATGCC", "GGCATAC")
    linear = engine.ldseguid("ACGGCAT", "ATGCCGT")
    assert _digest(circular) == _digest(linear)
    assert engine.cdseguid("ACGGCAT", "ATGCCGT") == circular


def test_ccseguid_derives_crick(engine):
    derived = engine.ccseguid("acgtt")
    assert derived == engine.ccseguid("ACGTT")
    assert derived == engine.ccseguid("ACGTT", "AACGT")


def test_idempotent(engine):
    assert engine.lsseguid("ACGT") == engine.lsseguid("ACGT")
    assert engine.cdseguid("ACGT", "ACGT") == engine.cdseguid("ACGT", "ACGT")


def test_custom_alphabet(engine):
    assert engine.lsseguid("ACGUBVDHKMSRYWN", alphabet="{RNA-extended}").startswith("lsseguid=")
    assert engine.lsseguid("ACGTXY", alphabet="{DNA},XY").startswith("lsseguid=")


# ----------------------------------------------------------------------
# Error boundaries
# ----------------------------------------------------------------------

@pytest.mark.parametrize("call", [
    lambda e: e.seguid(""),
    lambda e: e.lsseguid(""),
    lambda e: e.csseguid(""),
    lambda e: e.ldseguid("", "ACGT"),
    lambda e: e.cdseguid("ACGT", ""),
    lambda e: e.ccseguid(""),
    lambda e: e.seguidv1(""),
])
def test_empty_input(engine, call):
    with pytest.raises(EmptySequenceError):
        call(engine)


def test_empty_protein_after_stripping(engine):
    with pytest.raises(EmptySequenceError, match="protein sequence must not be empty"):
        engine.seguidv1("BOUZ")


def test_unknown_symbols(engine):
    with pytest.raises(UnknownSymbolError):
        engine.lsseguid("12345")
    with pytest.raises(UnknownSymbolError):
        engine.seguid("at")


def test_invalid_alphabet(engine):
    with pytest.raises(InvalidAlphabetSpecError):
        engine.seguid("ACGT", alphabet="{invalid}")


def test_ldseguid_length_mismatch(engine):
    with pytest.raises(LengthMismatchError, match="must be equal length"):
        engine.ldseguid("-TATGCC", "-GCATA")


def test_ldseguid_non_complementary(engine):
    with pytest.raises(NonComplementaryPairError):
        engine.ldseguid("ACGT", "ACGA")


def test_ldseguid_single_stranded_alphabet(engine):
    with pytest.raises(SingleStrandedAlphabetError):
        engine.ldseguid("AC", "GT", alphabet="{protein}")


def test_ccseguid_drops_non_dna_symbols_when_deriving_crick(engine):
    with pytest.raises(LengthMismatchError):
        engine.ccseguid("ACGN")


def test_validation_errors_are_value_errors(engine):
    with pytest.raises(ValueError):
        engine.seguid("")


# ----------------------------------------------------------------------
# Dispatch
# ----------------------------------------------------------------------

def test_kind_from_name():
    assert ChecksumKind.from_name("LDSEGUID") is ChecksumKind.LDSEGUID
    assert ChecksumKind.from_name(ChecksumKind.SEGUID) is ChecksumKind.SEGUID
    assert ChecksumKind.CSSEGUID.prefix == "csseguid="


def test_unknown_kind():
    with pytest.raises(UnknownChecksumTypeError) as exc:
        ChecksumKind.from_name("foo")
    assert str(exc.value) == "Unknown --type='foo'"


def test_checksum_dispatch(engine):
    assert engine.checksum("seguid", "AT") == engine.seguid("AT")
    assert engine.checksum("ldseguid", "-TATGCC", "-GCATAC") == engine.ldseguid("-TATGCC", "-GCATAC")
    pair = StrandPair("GTATGCC", "GGCATAC")
    assert engine.checksum(ChecksumKind.CDSEGUID, pair) == engine.cdseguid("GTATGCC", "GGCATAC")
    assert engine.checksum("ccseguid", "ACGTT") == engine.ccseguid("ACGTT")
    assert engine.checksum("seguidv1", "ACDEFGHIKLMNPQRSTVWY", form="short") == "tRntFm"


def test_checksum_requires_pair_for_double_stranded_kinds(engine):
    with pytest.raises(SequenceSyntaxError, match="Double-stranded sequence expected"):
        engine.checksum("ldseguid", "ACGT")


def test_checksum_rejects_pair_for_single_stranded_kinds(engine):
    with pytest.raises(SequenceSyntaxError, match="Single-stranded sequence expected"):
        engine.checksum("seguid", StrandPair("ACGT", "ACGT"))


def test_evaluate_success(engine):
    outcome = engine.evaluate("seguid", "AT")
    assert outcome.ok
    assert outcome.kind is ChecksumKind.SEGUID
    assert outcome.value == "seguid=Ax/RG6hzSrMEEWoCO1IWMGska+4"


def test_evaluate_captures_validation_errors(engine):
    outcome = engine.evaluate("ldseguid", "ACGT", "ACGA")
    assert not outcome.ok
    assert outcome.value is None
    assert outcome.error.kind == ErrorKind.NON_COMPLEMENTARY_PAIR


def test_evaluate_propagates_internal_errors(engine, monkeypatch):
    def broken(seq, alphabet, url_safe):
        raise InternalConsistencyError("Invalid checksum length: 26 != 27")

    monkeypatch.setattr(checksum_engine, "compute_digest", broken)
    with pytest.raises(InternalConsistencyError):
        engine.evaluate("seguid", "AT")


def test_engine_logs_with_custom_logger(caplog):
    custom = logging.getLogger("tests.engine")
    with caplog.at_level(logging.DEBUG, logger="tests.engine"):
        ChecksumEngine(logger_instance=custom).seguid("AT")
    assert "seguid: canonical form of length 2" in caplog.text


def test_module_level_functions():
    assert seguidkit.seguid("AT") == "seguid=Ax/RG6hzSrMEEWoCO1IWMGska+4"
    assert seguidkit.csseguid("GTAC") == seguidkit.csseguid("ACGT")
    assert seguidkit.checksum("lsseguid", "AT") == seguidkit.lsseguid("AT")
    assert seguidkit.evaluate("seguid", "").error.kind == ErrorKind.EMPTY_SEQUENCE


def test_ccseguid_hashes_the_canonical_linear_duplex(engine):
    circular = engine.ccseguid("ACGT", "ACGT")
    assert _digest(circular) == _digest(engine.ldseguid("ATGC", "GCAT"))


def test_ccseguid_can_depend_on_reading_direction(engine):
    forward = engine.ccseguid("ACGT", "ACGT")
    backward = engine.ccseguid("TGCA", "TGCA")
    assert _digest(backward) == _digest(engine.ldseguid("ACGT", "ACGT"))
    assert forward != backward


def test_wobble_alphabet_rejected_by_double_stranded_kinds(engine):
    with pytest.raises(SingleStrandedAlphabetError):
        engine.ldseguid("GU", "AC", alphabet="{RNA},GU")


def test_evaluate_captures_unknown_kind(engine):
    outcome = engine.evaluate("nope", "ACGT")
    assert not outcome.ok
    assert outcome.kind is None
    assert outcome.error.kind == ErrorKind.UNKNOWN_CHECKSUM_TYPE
