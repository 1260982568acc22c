"""
Error taxonomy for the SEGUID checksum engine.

Two families are kept apart so callers can tell "bad input" from
"engine bug":

    - SeguidValidationError: the caller supplied something invalid
      (empty sequence, unknown symbol, non-complementary strands, ...).
      Subclasses ValueError, so generic ``except ValueError`` still works.
    - InternalConsistencyError: an invariant of the engine itself was
      violated (digest of unexpected length, ordering assumption broken).
      Subclasses RuntimeError.

Every error carries an ``ErrorKind`` plus the structured context needed to
reproduce it (offending symbols, positions, lengths).
"""

from enum import Enum
from typing import Iterable, Optional, Tuple


class ErrorKind(str, Enum):
    """Machine-readable error kinds."""

    EMPTY_SEQUENCE = "empty_sequence"
    UNKNOWN_SYMBOL = "unknown_symbol"
    LENGTH_MISMATCH = "length_mismatch"
    STAGGER_CONFLICT = "stagger_conflict"
    NON_COMPLEMENTARY_PAIR = "non_complementary_pair"
    INVALID_ALPHABET_SPEC = "invalid_alphabet_spec"
    INVALID_ALPHABET_CHARACTERS = "invalid_alphabet_characters"
    EMPTY_ALPHABET = "empty_alphabet"
    MALFORMED_ALPHABET = "malformed_alphabet"
    SINGLE_STRANDED_ALPHABET = "single_stranded_alphabet"
    INVALID_FORM = "invalid_form"
    SYNTAX_ERROR = "syntax_error"
    UNKNOWN_CHECKSUM_TYPE = "unknown_checksum_type"
    INTERNAL = "internal"


class SeguidError(Exception):
    """Base class for every error raised by seguidkit."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SeguidValidationError(SeguidError, ValueError):
    """Invalid caller input. Recoverable; report verbatim."""


class InternalConsistencyError(SeguidError, RuntimeError):
    """An engine invariant failed. Never caused by user input."""

    kind = ErrorKind.INTERNAL


def _join_symbols(symbols: Iterable[str]) -> str:
    return " ".join(repr(s)[1:-1] for s in symbols)


class EmptySequenceError(SeguidValidationError):
    kind = ErrorKind.EMPTY_SEQUENCE

    def __init__(self, message: str = "A sequence must not be empty"):
        super().__init__(message)


class UnknownSymbolError(SeguidValidationError):
    """Sequence contains symbols absent from the alphabet."""

    kind = ErrorKind.UNKNOWN_SYMBOL

    def __init__(self, symbols: Iterable[str]):
        self.symbols: Tuple[str, ...] = tuple(symbols)
        super().__init__(
            f"Detected symbols {_join_symbols(self.symbols)} not in the 'alphabet'"
        )


class LengthMismatchError(SeguidValidationError):
    kind = ErrorKind.LENGTH_MISMATCH

    def __init__(self, watson_length: int, crick_length: int, message: Optional[str] = None):
        self.watson_length = watson_length
        self.crick_length = crick_length
        super().__init__(
            message
            or f"Watson and Crick strands must be equal length ({watson_length} != {crick_length})"
        )


class StaggerConflictError(SeguidValidationError):
    """Both strands are gapped at the same end of the molecule."""

    kind = ErrorKind.STAGGER_CONFLICT

    def __init__(self, end: str, spec: str = ""):
        self.end = end
        self.spec = spec
        message = (
            "Please trim the staggering. Watson and Crick are both staggered "
            f"at the {end} of the double-stranded sequence"
        )
        if spec:
            message += f": '{spec}'"
        super().__init__(message)


class NonComplementaryPairError(SeguidValidationError):
    kind = ErrorKind.NON_COMPLEMENTARY_PAIR

    def __init__(self, watson_symbol: str, crick_symbol: str, position: int):
        self.watson_symbol = watson_symbol
        self.crick_symbol = crick_symbol
        self.position = position
        super().__init__(
            f"Non-complementary basepair ({watson_symbol},{crick_symbol}) "
            f"detected at position {position}"
        )


class InvalidAlphabetSpecError(SeguidValidationError):
    kind = ErrorKind.INVALID_ALPHABET_SPEC

    def __init__(self, component: str, reason: str = "Unknown alphabet specification"):
        self.component = component
        super().__init__(f"{reason}: '{component}'")


class InvalidAlphabetCharactersError(SeguidValidationError):
    kind = ErrorKind.INVALID_ALPHABET_CHARACTERS

    def __init__(self, characters: Iterable[str]):
        self.characters: Tuple[str, ...] = tuple(characters)
        super().__init__(
            "Only A-Z a-z 0-9 -\\n; allowed. "
            f"Invalid: {_join_symbols(self.characters)}"
        )


class EmptyAlphabetError(SeguidValidationError):
    kind = ErrorKind.EMPTY_ALPHABET

    def __init__(self):
        super().__init__("Argument 'alphabet' must not be empty")


class MalformedAlphabetError(SeguidValidationError):
    """A table key never appears among the complement values."""

    kind = ErrorKind.MALFORMED_ALPHABET

    def __init__(self, keys: Iterable[str]):
        self.keys: Tuple[str, ...] = tuple(keys)
        super().__init__(
            f"Detected keys ({_join_symbols(self.keys)}) in 'alphabet' "
            "that are not in the values"
        )


class SingleStrandedAlphabetError(SeguidValidationError):
    kind = ErrorKind.SINGLE_STRANDED_ALPHABET

    def __init__(self, detail: str = ""):
        self.detail = detail
        message = "Was a single-stranded alphabet used by mistake?"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class InvalidFormError(SeguidValidationError):
    kind = ErrorKind.INVALID_FORM

    def __init__(self, form):
        self.form = form
        super().__init__(f"Invalid form: {form}")


class SequenceSyntaxError(SeguidValidationError):
    kind = ErrorKind.SYNTAX_ERROR

    def __init__(self, spec: str, message: Optional[str] = None):
        self.spec = spec
        super().__init__(message or f"Syntax error in sequence string: '{spec}'")


class UnknownChecksumTypeError(SeguidValidationError):
    kind = ErrorKind.UNKNOWN_CHECKSUM_TYPE

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown --type='{name}'")
