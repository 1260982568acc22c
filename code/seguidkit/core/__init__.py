"""
seguidkit core - alphabets, validation, sequence algorithms and the checksum
engine.

Everything here is free of I/O; the CLI in ``seguidkit.cli`` is the only
component that reads input or configures logging.
"""

from .errors import (
    ErrorKind,
    SeguidError,
    SeguidValidationError,
    InternalConsistencyError,
    EmptySequenceError,
    UnknownSymbolError,
    LengthMismatchError,
    StaggerConflictError,
    NonComplementaryPairError,
    InvalidAlphabetSpecError,
    InvalidAlphabetCharactersError,
    EmptyAlphabetError,
    MalformedAlphabetError,
    SingleStrandedAlphabetError,
    InvalidFormError,
    SequenceSyntaxError,
    UnknownChecksumTypeError
)
from .types import StrandPair
from .alphabet import (
    AlphabetPreset,
    AlphabetTable,
    PREDEFINED_ALPHABETS,
    assert_well_formed,
    build_table,
    expand_alphabet_spec,
    get_alphabet_preset,
    list_alphabet_presets
)
from .manipulation import (
    CIRCULAR_CONNECTOR,
    circular_duplex_form,
    dihedral_duplex_form,
    min_rotation,
    reverse,
    reverse_complement_dna,
    rotate,
    rotate_to_min
)
from .validator import assert_complementary, assert_in_alphabet
from .parser import SequenceSpec, parse_sequence_string
from .interfaces import Canonicalizer
from .checksum_engine import (
    ChecksumEngine,
    ChecksumKind,
    ChecksumOutcome,
    compute_digest,
    format_checksum
)

__all__ = [
    # Errors
    'ErrorKind',
    'SeguidError',
    'SeguidValidationError',
    'InternalConsistencyError',
    'EmptySequenceError',
    'UnknownSymbolError',
    'LengthMismatchError',
    'StaggerConflictError',
    'NonComplementaryPairError',
    'InvalidAlphabetSpecError',
    'InvalidAlphabetCharactersError',
    'EmptyAlphabetError',
    'MalformedAlphabetError',
    'SingleStrandedAlphabetError',
    'InvalidFormError',
    'SequenceSyntaxError',
    'UnknownChecksumTypeError',
    # Types
    'StrandPair',
    'SequenceSpec',
    # Alphabets
    'AlphabetPreset',
    'AlphabetTable',
    'PREDEFINED_ALPHABETS',
    'assert_well_formed',
    'build_table',
    'expand_alphabet_spec',
    'get_alphabet_preset',
    'list_alphabet_presets',
    # Sequence algorithms
    'CIRCULAR_CONNECTOR',
    'circular_duplex_form',
    'dihedral_duplex_form',
    'min_rotation',
    'reverse',
    'reverse_complement_dna',
    'rotate',
    'rotate_to_min',
    # Validation and parsing
    'assert_complementary',
    'assert_in_alphabet',
    'parse_sequence_string',
    # Engine
    'Canonicalizer',
    'ChecksumEngine',
    'ChecksumKind',
    'ChecksumOutcome',
    'compute_digest',
    'format_checksum'
]
