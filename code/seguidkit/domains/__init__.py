"""
Sequence domains for seguidkit.

Each domain (single_strand, double_strand) implements the Canonicalizer
interface for one family of checksum kinds. The checksum engine picks the
canonicalizer from the requested kind.
"""
