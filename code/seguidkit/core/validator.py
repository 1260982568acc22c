"""
Validation of sequences against alphabets and of strand complementarity.
"""

import logging
import string
from collections.abc import Mapping

from .alphabet import AlphabetTable, assert_well_formed, build_table
from .errors import (
    EmptyAlphabetError,
    InvalidAlphabetCharactersError,
    LengthMismatchError,
    NonComplementaryPairError,
    SingleStrandedAlphabetError,
    UnknownSymbolError,
)
from .manipulation import reverse

logger = logging.getLogger(__name__)

GAP = "-"

# Characters allowed anywhere in a sequence string or an alphabet table.
VALID_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-\n;")


def assert_in_alphabet(seq: str, table: Mapping) -> None:
    """
    Check that every symbol of ``seq`` is a key of ``table``.

    Args:
        seq: Sequence to validate
        table: Alphabet table (only its keys are used)

    Raises:
        EmptyAlphabetError: If ``table`` has no entries
        InvalidAlphabetCharactersError: If a table key is outside
            A-Z a-z 0-9 - newline semicolon
        UnknownSymbolError: Listing every distinct symbol of ``seq`` missing
            from ``table``, in order of first appearance
    """
    if len(table) == 0:
        raise EmptyAlphabetError()

    invalid = [symbol for symbol in table if symbol not in VALID_CHARACTERS]
    if invalid:
        raise InvalidAlphabetCharactersError(invalid)

    if not seq:
        return

    # dict.fromkeys keeps first-seen order while de-duplicating
    unknown = [symbol for symbol in dict.fromkeys(seq) if symbol not in table]
    if unknown:
        raise UnknownSymbolError(unknown)


def complementarity_table(alphabet_spec: str) -> AlphabetTable:
    """
    Build the pairing table used for double-stranded checks.

    Rejects non-pairing alphabets and adds a self-pairing gap symbol when
    the alphabet does not define one.

    Raises:
        SingleStrandedAlphabetError: If the alphabet has at most one symbol
            or its first symbol does not have exactly one complement
        MalformedAlphabetError: If the table is not symmetric
    """
    table = build_table(alphabet_spec)

    if len(table) <= 1:
        raise SingleStrandedAlphabetError("values")
    # only the first entry is inspected; wobble tables such as {RNA},GU fail here
    if len(next(iter(table.values()))) != 1:
        raise SingleStrandedAlphabetError("value length")

    assert_well_formed(table)
    return table.with_symbols({GAP: GAP})


def assert_complementary(watson: str, crick: str, alphabet_spec: str) -> None:
    """
    Check that two strands pair base-by-base.

    Crick is read in reverse so each Watson symbol is aligned with its
    antiparallel partner. Positions where either strand has a gap are
    skipped.

    Args:
        watson: Watson strand, 5'->3'
        crick: Crick strand, 5'->3' on its own strand
        alphabet_spec: Alphabet specification with complementary pairs

    Raises:
        SingleStrandedAlphabetError: If the alphabet does not pair symbols
        LengthMismatchError: If the strands differ in length
        UnknownSymbolError: If a strand uses symbols outside the alphabet
        NonComplementaryPairError: At the first (1-based) mismatching position
    """
    table = complementarity_table(alphabet_spec)

    if len(watson) != len(crick):
        raise LengthMismatchError(len(watson), len(crick))

    assert_in_alphabet(watson, table)
    assert_in_alphabet(crick, table)

    for position, (w, c) in enumerate(zip(watson, reverse(crick)), start=1):
        if w == GAP or c == GAP:
            continue
        if c not in table[w]:
            raise NonComplementaryPairError(w, c, position)

    logger.debug(f"Strands of length {len(watson)} are complementary under '{alphabet_spec}'")
