"""
Value types shared across seguidkit.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StrandPair:
    """
    A double-stranded molecule.

    Both strands are written 5'->3' on their own strand, so ``crick`` runs
    antiparallel to ``watson``: ``watson[i]`` pairs with ``crick[-1 - i]``.

    Attributes:
        watson: The "top" strand
        crick: The "bottom" strand
    """

    watson: str
    crick: str

    def swapped(self) -> "StrandPair":
        """Relabel the strands (Crick becomes Watson)."""
        return StrandPair(self.crick, self.watson)

    def reversed(self) -> "StrandPair":
        """Read both strands in the opposite direction."""
        return StrandPair(self.watson[::-1], self.crick[::-1])

    def __len__(self) -> int:
        return len(self.watson)

