"""
Double-stranded sequence domain.

Canonicalizers for linear and circular Watson/Crick pairs.
"""

from .canonicalizer import (
    CircularDuplexCanonicalizer,
    DihedralDuplexCanonicalizer,
    LinearDuplexCanonicalizer,
)

__all__ = [
    'LinearDuplexCanonicalizer',
    'CircularDuplexCanonicalizer',
    'DihedralDuplexCanonicalizer'
]
