"""
seguidkit - SEGUID checksums for biological sequences.

Stable, alphabet-aware identifiers for linear and circular, single- and
double-stranded sequences, plus the legacy SEGUID v1 protein checksum.

Quick use:
    >>> import seguidkit
    >>> seguidkit.seguid("AT")
    'seguid=Ax/RG6hzSrMEEWoCO1IWMGska+4'
"""

from .core import (
    ChecksumEngine,
    ChecksumKind,
    ChecksumOutcome,
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
    UnknownChecksumTypeError,
    SequenceSpec,
    StrandPair,
    get_alphabet_preset,
    list_alphabet_presets,
    parse_sequence_string
)

__version__ = "0.1.0"

_DEFAULT_ENGINE = ChecksumEngine()

seguid = _DEFAULT_ENGINE.seguid
lsseguid = _DEFAULT_ENGINE.lsseguid
csseguid = _DEFAULT_ENGINE.csseguid
ldseguid = _DEFAULT_ENGINE.ldseguid
cdseguid = _DEFAULT_ENGINE.cdseguid
ccseguid = _DEFAULT_ENGINE.ccseguid
seguidv1 = _DEFAULT_ENGINE.seguidv1
seguidv1urlsafe = _DEFAULT_ENGINE.seguidv1urlsafe
checksum = _DEFAULT_ENGINE.checksum
evaluate = _DEFAULT_ENGINE.evaluate

__all__ = [
    '__version__',
    # Checksums
    'seguid',
    'lsseguid',
    'csseguid',
    'ldseguid',
    'cdseguid',
    'ccseguid',
    'seguidv1',
    'seguidv1urlsafe',
    'checksum',
    'evaluate',
    # Engine and types
    'ChecksumEngine',
    'ChecksumKind',
    'ChecksumOutcome',
    'StrandPair',
    'SequenceSpec',
    'parse_sequence_string',
    'get_alphabet_preset',
    'list_alphabet_presets',
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
    'UnknownChecksumTypeError'
]
