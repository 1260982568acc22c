"""
Checksum Engine - SEGUID checksums for linear/circular, single/double-stranded
sequences.

The engine orchestrates, for each checksum kind:

    1. Preprocessing of the input (legacy v1 only)
    2. Structural validation (empty input, strand lengths, complementarity)
    3. Canonicalization (rotation / strand selection)
    4. Alphabet check, SHA-1 digest and base64 encoding of the canonical string
    5. Formatting as long, short or both

Kinds are pluggable through the Canonicalizer interface; the engine itself
has no state besides its logger and is safe to share between threads.
"""

import base64
import hashlib
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from seguidkit.domains.double_strand import (
    CircularDuplexCanonicalizer,
    DihedralDuplexCanonicalizer,
    LinearDuplexCanonicalizer,
)
from seguidkit.domains.single_strand import (
    CircularSequenceCanonicalizer,
    LinearSequenceCanonicalizer,
    ProteinV1Canonicalizer,
)

from .alphabet import build_table
from .errors import (
    EmptySequenceError,
    InternalConsistencyError,
    InvalidFormError,
    SeguidValidationError,
    SequenceSyntaxError,
    UnknownChecksumTypeError,
)
from .interfaces import Canonicalizer
from .types import StrandPair
from .validator import assert_in_alphabet

logger = logging.getLogger(__name__)

SHORT_LENGTH = 6
DIGEST_LENGTH = 27
FORMS = ("long", "short", "both")

_BASE64_CHARACTERS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/_-"
)


class ChecksumKind(Enum):
    """
    Supported checksum kinds.

    Each value is ``(name, url_safe, default_alphabet, double_stranded)``;
    the output prefix is ``name + "="``.
    """

    SEGUID = ("seguid", False, "{DNA}", False)
    LSSEGUID = ("lsseguid", True, "{DNA}", False)
    CSSEGUID = ("csseguid", True, "{DNA}", False)
    LDSEGUID = ("ldseguid", True, "{DNA}", True)
    CDSEGUID = ("cdseguid", True, "{DNA}", True)
    CCSEGUID = ("ccseguid", True, "{DNA}", True)
    SEGUIDV1 = ("seguidv1", False, "{proteinV1}", False)
    SEGUIDV1URLSAFE = ("seguidv1urlsafe", True, "{proteinV1}", False)

    def __init__(self, label: str, url_safe: bool, default_alphabet: str, double_stranded: bool):
        self.label = label
        self.url_safe = url_safe
        self.default_alphabet = default_alphabet
        self.double_stranded = double_stranded

    @property
    def prefix(self) -> str:
        return f"{self.label}="

    @classmethod
    def from_name(cls, name: Union[str, "ChecksumKind"]) -> "ChecksumKind":
        """
        Resolve a kind from its name (case-insensitive).

        Raises:
            UnknownChecksumTypeError: If ``name`` is not a known kind
        """
        if isinstance(name, cls):
            return name
        lowered = str(name).lower()
        for kind in cls:
            if kind.label == lowered:
                return kind
        raise UnknownChecksumTypeError(name)


_CANONICALIZERS: Dict[ChecksumKind, Callable[[str], Canonicalizer]] = {
    ChecksumKind.SEGUID: LinearSequenceCanonicalizer,
    ChecksumKind.LSSEGUID: LinearSequenceCanonicalizer,
    ChecksumKind.CSSEGUID: CircularSequenceCanonicalizer,
    ChecksumKind.LDSEGUID: LinearDuplexCanonicalizer,
    ChecksumKind.CDSEGUID: CircularDuplexCanonicalizer,
    ChecksumKind.CCSEGUID: DihedralDuplexCanonicalizer,
    ChecksumKind.SEGUIDV1: ProteinV1Canonicalizer,
    ChecksumKind.SEGUIDV1URLSAFE: ProteinV1Canonicalizer,
}


def compute_digest(seq: str, alphabet: str, url_safe: bool) -> str:
    """
    SHA-1 digest of ``seq``, base64 encoded without padding.

    Args:
        seq: Canonical sequence string
        alphabet: Alphabet specification ``seq`` must be drawn from
        url_safe: Use the base64url alphabet ("-" and "_" instead of "+" and "/")

    Returns:
        27-character encoded digest

    Raises:
        EmptySequenceError: If ``seq`` is empty
        UnknownSymbolError: If ``seq`` has symbols outside ``alphabet``
        InternalConsistencyError: If the encoding is not 27 base64 characters

    Example:
        >>> compute_digest("AT", "{DNA}", url_safe=False)
        'Ax/RG6hzSrMEEWoCO1IWMGska+4'
    """
    if not seq:
        raise EmptySequenceError()

    assert_in_alphabet(seq, build_table(alphabet))

    digest = hashlib.sha1(seq.encode("utf-8")).digest()
    if url_safe:
        encoded = base64.urlsafe_b64encode(digest)
    else:
        encoded = base64.b64encode(digest)
    encoded = encoded.decode("ascii").rstrip("=")

    if len(encoded) != DIGEST_LENGTH:
        raise InternalConsistencyError(
            f"Invalid checksum length: {len(encoded)} != {DIGEST_LENGTH}"
        )
    if not set(encoded) <= _BASE64_CHARACTERS:
        raise InternalConsistencyError("Invalid base64 character in checksum")

    return encoded


def format_checksum(prefix: str, encoded: str, form: str) -> str:
    """
    Format an encoded digest.

    Args:
        prefix: Kind prefix, e.g. "lsseguid="
        encoded: 27-character encoded digest
        form: "long" (prefix + digest), "short" (first 6 characters) or
            "both" ("<short>,<long>")

    Raises:
        InvalidFormError: For any other ``form``
    """
    selected = form.lower() if isinstance(form, str) else form
    if selected == "long":
        return f"{prefix}{encoded}"
    if selected == "short":
        return encoded[:SHORT_LENGTH]
    if selected == "both":
        return f"{encoded[:SHORT_LENGTH]},{prefix}{encoded}"
    raise InvalidFormError(form)


@dataclass(frozen=True)
class ChecksumOutcome:
    """
    Result of ``ChecksumEngine.evaluate``: a checksum or the validation error.

    Attributes:
        kind: Checksum kind that was requested (None if the name is unknown)
        value: Formatted checksum (None on error)
        error: Validation error (None on success); branch on ``error.kind``
    """

    kind: Optional[ChecksumKind]
    value: Optional[str] = None
    error: Optional[SeguidValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ChecksumEngine:
    """
    SEGUID checksum engine.

    Usage:
        engine = ChecksumEngine()

        engine.seguid("AT")
        # 'seguid=Ax/RG6hzSrMEEWoCO1IWMGska+4'

        engine.cdseguid("GTATGCC", "GGCATAC", form="short")

        engine.checksum("csseguid", "GTAC") == engine.csseguid("ACGT")
        # True
    """

    def __init__(self, logger_instance: Optional[logging.Logger] = None):
        """
        Initialize the engine.

        Args:
            logger_instance: Optional custom logger
        """
        self.logger = logger_instance or logger

    def _run(
        self,
        kind: ChecksumKind,
        obj: Any,
        alphabet: Optional[str],
        form: str
    ) -> str:
        # Fail fast on a bad form before doing any work
        if not isinstance(form, str) or form.lower() not in FORMS:
            raise InvalidFormError(form)

        canonicalizer = _CANONICALIZERS[kind](
            kind.default_alphabet if alphabet is None else alphabet
        )

        prepared = canonicalizer.preprocess(obj)
        canonicalizer.validate(prepared)
        canonical = canonicalizer.canonicalize(prepared)
        self.logger.debug(f"{kind.label}: canonical form of length {len(canonical)}")

        encoded = compute_digest(canonical, canonicalizer.digest_alphabet, kind.url_safe)
        return format_checksum(kind.prefix, encoded, form)

    # ------------------------------------------------------------------
    # Single-stranded kinds
    # ------------------------------------------------------------------

    def seguid(self, seq: str, alphabet: str = "{DNA}", form: str = "long") -> str:
        """
        SEGUID checksum of a linear sequence (standard base64).

        Example:
            >>> ChecksumEngine().seguid("AT")
            'seguid=Ax/RG6hzSrMEEWoCO1IWMGska+4'
        """
        return self._run(ChecksumKind.SEGUID, seq, alphabet, form)

    def lsseguid(self, seq: str, alphabet: str = "{DNA}", form: str = "long") -> str:
        """
        Linear single-stranded SEGUID (base64url).

        Example:
            >>> ChecksumEngine().lsseguid("AT")
            'lsseguid=Ax_RG6hzSrMEEWoCO1IWMGska-4'
        """
        return self._run(ChecksumKind.LSSEGUID, seq, alphabet, form)

    def csseguid(self, seq: str, alphabet: str = "{DNA}", form: str = "long") -> str:
        """Circular single-stranded SEGUID: invariant under rotation."""
        return self._run(ChecksumKind.CSSEGUID, seq, alphabet, form)

    # ------------------------------------------------------------------
    # Double-stranded kinds
    # ------------------------------------------------------------------

    def ldseguid(self, watson: str, crick: str, alphabet: str = "{DNA}", form: str = "long") -> str:
        """
        Linear double-stranded SEGUID.

        Args:
            watson: Watson strand, 5'->3'
            crick: Crick strand, 5'->3' on its own strand
            alphabet: Alphabet with complementary pairs
            form: "long", "short" or "both"

        Raises:
            EmptySequenceError: If either strand is empty
            LengthMismatchError: If the strands differ in length
            NonComplementaryPairError: If the strands do not pair
        """
        return self._run(ChecksumKind.LDSEGUID, StrandPair(watson, crick), alphabet, form)

    def cdseguid(self, watson: str, crick: str, alphabet: str = "{DNA}", form: str = "long") -> str:
        """
        Circular double-stranded SEGUID.

        The pair is rotated to the minimal rotation of
        ``watson + "TTTT" + crick`` before hashing. That origin can depend on
        which strand is passed as Watson, e.g. ("TGA", "TCA") and
        ("TCA", "TGA") give different checksums.
        """
        return self._run(ChecksumKind.CDSEGUID, StrandPair(watson, crick), alphabet, form)

    def ccseguid(
        self,
        watson: str,
        crick: Optional[str] = None,
        alphabet: str = "{DNA}",
        form: str = "long"
    ) -> str:
        """
        Circular double-stranded SEGUID over both reading directions.

        Like ``cdseguid`` but the reversed strands compete for the origin as
        well. It shares the connector caveat of ``cdseguid``: strand swap or
        reversal of the input can change the checksum. When
        ``crick`` is omitted, ``watson`` is uppercased and its DNA reverse
        complement is used as Crick.
        """
        obj = watson if crick is None else StrandPair(watson, crick)
        return self._run(ChecksumKind.CCSEGUID, obj, alphabet, form)

    # ------------------------------------------------------------------
    # Legacy v1 protein kinds
    # ------------------------------------------------------------------

    def seguidv1(self, seq: str, alphabet: str = "{proteinV1}", form: str = "long") -> str:
        """
        Legacy SEGUID v1 for proteins (standard base64).

        Case is ignored and non-canonical residues are stripped before
        hashing.

        Example:
            >>> ChecksumEngine().seguidv1("ACDEFGHIKLMNPQRSTVWY")
            'seguidv1=tRntFmqHM23Z+bMbNDfKXFC1+Es'
        """
        return self._run(ChecksumKind.SEGUIDV1, seq, alphabet, form)

    def seguidv1urlsafe(self, seq: str, alphabet: str = "{proteinV1}", form: str = "long") -> str:
        """Legacy SEGUID v1 for proteins (base64url)."""
        return self._run(ChecksumKind.SEGUIDV1URLSAFE, seq, alphabet, form)

    # ------------------------------------------------------------------
    # Generic entry points
    # ------------------------------------------------------------------

    def checksum(
        self,
        kind: Union[str, ChecksumKind],
        sequence: Union[str, StrandPair],
        crick: Optional[str] = None,
        alphabet: Optional[str] = None,
        form: str = "long"
    ) -> str:
        """
        Compute a checksum of any kind.

        Args:
            kind: ChecksumKind or its name ("ldseguid", ...)
            sequence: Sequence string, Watson strand, or a StrandPair
            crick: Crick strand for double-stranded kinds (unless
                ``sequence`` is a StrandPair)
            alphabet: Alphabet specification (default depends on kind)
            form: "long", "short" or "both"

        Raises:
            UnknownChecksumTypeError: If ``kind`` is not known
            SequenceSyntaxError: If a double-stranded kind gets a single strand
        """
        kind = ChecksumKind.from_name(kind)

        if crick is not None:
            sequence = StrandPair(sequence, crick)

        # ccseguid also accepts a single strand and derives its Crick
        needs_pair = kind.double_stranded and kind is not ChecksumKind.CCSEGUID
        if needs_pair and not isinstance(sequence, StrandPair):
            raise SequenceSyntaxError(
                str(sequence), message="Double-stranded sequence expected"
            )
        if not kind.double_stranded and isinstance(sequence, StrandPair):
            raise SequenceSyntaxError(
                f"{sequence.watson};{sequence.crick}",
                message="Single-stranded sequence expected"
            )

        return self._run(kind, sequence, alphabet, form)

    def evaluate(
        self,
        kind: Union[str, ChecksumKind],
        sequence: Union[str, StrandPair],
        crick: Optional[str] = None,
        alphabet: Optional[str] = None,
        form: str = "long"
    ) -> ChecksumOutcome:
        """
        Like ``checksum`` but returns validation errors instead of raising.

        InternalConsistencyError is not captured: it signals an engine
        defect, not bad input.
        """
        try:
            resolved = ChecksumKind.from_name(kind)
        except UnknownChecksumTypeError as e:
            self.logger.debug(f"Rejected checksum type: {e}")
            return ChecksumOutcome(kind=None, error=e)

        try:
            value = self.checksum(resolved, sequence, crick=crick, alphabet=alphabet, form=form)
        except SeguidValidationError as e:
            self.logger.debug(f"{resolved.label} rejected input: {e}")
            return ChecksumOutcome(kind=resolved, error=e)
        return ChecksumOutcome(kind=resolved, value=value)
