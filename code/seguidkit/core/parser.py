"""
Parsing of sequence strings that may encode a double-stranded molecule.

Three notations are accepted:

    ACGT          single strand
    ACGT;ACGT     Watson;Crick, both written 5'->3'
    ACGT\\nTGCA    Watson on the first line, Crick written 3'->5' below it

Only the syntax is checked here; alphabet membership and base pairing are
validated later by the checksum engine.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .errors import LengthMismatchError, SequenceSyntaxError, StaggerConflictError
from .types import StrandPair
from .manipulation import reverse

_STRAND = r"[0-9A-Za-z-]+"
# Matched with fullmatch: "$" would also accept a trailing newline.
SINGLE_STRAND_PATTERN = re.compile(_STRAND)
SEMICOLON_PATTERN = re.compile(rf"({_STRAND});({_STRAND})")
NEWLINE_PATTERN = re.compile(rf"({_STRAND})\n({_STRAND})")


@dataclass(frozen=True)
class SequenceSpec:
    """
    Result of parsing a sequence string.

    Attributes:
        type: "ss" (single-stranded) or "ds" (double-stranded)
        specification: The original string
        watson: The single strand, or the Watson strand
        crick: Crick strand 5'->3' (None when single-stranded)
    """

    type: str
    specification: str
    watson: str
    crick: Optional[str] = None

    @property
    def is_double_stranded(self) -> bool:
        return self.type == "ds"

    def as_strand_pair(self) -> StrandPair:
        if not self.is_double_stranded:
            raise SequenceSyntaxError(
                self.specification, message="Double-stranded sequence expected"
            )
        return StrandPair(self.watson, self.crick)


def is_staggered(watson: str, crick: str) -> bool:
    """True if either strand contains a gap."""
    return "-" in watson or "-" in crick


def escape_sequence_spec(spec: str) -> str:
    """Make newlines visible in error messages."""
    return spec.replace("\n", "\\n")


def _validate_strands(watson: str, crick: str, spec: str) -> None:
    if len(watson) != len(crick):
        raise LengthMismatchError(
            len(watson), len(crick),
            message=(
                "Double-strand sequence string specifies two strands of different "
                f"lengths ({len(watson)} != {len(crick)}): '{escape_sequence_spec(spec)}'"
            )
        )

    if not is_staggered(watson, crick):
        return

    # Crick reversed lines up under Watson
    rcrick = reverse(crick)
    if watson.startswith("-") and rcrick.startswith("-"):
        raise StaggerConflictError("beginning", escape_sequence_spec(spec))
    if watson.endswith("-") and rcrick.endswith("-"):
        raise StaggerConflictError("end", escape_sequence_spec(spec))


def parse_sequence_string(spec: str) -> SequenceSpec:
    """
    Parse a single- or double-stranded sequence string.

    Args:
        spec: Raw sequence text

    Returns:
        SequenceSpec

    Raises:
        SequenceSyntaxError: If the text matches none of the notations
        LengthMismatchError: If the two strands differ in length
        StaggerConflictError: If both strands are gapped at the same end

    Examples:
        >>> parse_sequence_string("ACGT").type
        'ss'
        >>> parse_sequence_string("-CGT;ACGT").crick
        'ACGT'
        >>> parse_sequence_string("-CGT\\nTGCA").crick
        'ACGT'
    """
    if SINGLE_STRAND_PATTERN.fullmatch(spec):
        return SequenceSpec("ss", spec, spec)

    match = SEMICOLON_PATTERN.fullmatch(spec)
    if match:
        watson, crick = match.groups()
        _validate_strands(watson, crick, spec)
        return SequenceSpec("ds", spec, watson, crick)

    match = NEWLINE_PATTERN.fullmatch(spec)
    if match:
        watson, rcrick = match.groups()
        crick = reverse(rcrick)
        _validate_strands(watson, crick, spec)
        return SequenceSpec("ds", spec, watson, crick)

    raise SequenceSyntaxError(
        spec,
        message=f"Syntax error in sequence string: '{escape_sequence_spec(spec)}'"
    )
