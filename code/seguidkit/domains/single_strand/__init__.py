"""
Single-stranded sequence domain.

Canonicalizers for linear and circular single strands and for the legacy
SEGUID v1 protein checksum.
"""

from .canonicalizer import (
    CircularSequenceCanonicalizer,
    LinearSequenceCanonicalizer,
    ProteinV1Canonicalizer,
)

__all__ = [
    'LinearSequenceCanonicalizer',
    'CircularSequenceCanonicalizer',
    'ProteinV1Canonicalizer'
]
