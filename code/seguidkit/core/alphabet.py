"""
Alphabet and complementarity tables.

An alphabet specification is a comma-separated list of components:

    - one character  ("A")  : a symbol that pairs with nothing (protein)
    - two characters ("AT") : a complementary pair, registered both ways

Predefined alphabets such as ``{DNA}`` are substituted textually before
parsing. The resulting ``AlphabetTable`` maps each symbol to the string of
symbols it may pair with on the opposite strand.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List

from .errors import InvalidAlphabetSpecError, MalformedAlphabetError


@dataclass(frozen=True)
class AlphabetPreset:
    """
    A named, predefined alphabet specification.

    Attributes:
        name: Token as written in a spec, braces included (e.g. "{DNA}")
        spec: Literal expansion substituted for the token
        description: Human-readable summary (shown by the CLI)
    """

    name: str
    spec: str
    description: str = ""


_PRESETS = (
    AlphabetPreset("{DNA}", "GC,AT", "Complementary DNA symbols"),
    AlphabetPreset("{RNA}", "GC,AU", "Complementary RNA symbols"),
    AlphabetPreset(
        "{DNA-extended}", "GC,AT,BV,DH,KM,SS,RY,WW,NN",
        "Extended DNA (IUPAC ambiguity codes)"
    ),
    AlphabetPreset(
        "{RNA-extended}", "GC,AU,BV,DH,KM,SS,RY,WW,NN",
        "Extended RNA (IUPAC ambiguity codes)"
    ),
    AlphabetPreset(
        "{protein}", "A,C,D,E,F,G,H,I,K,L,M,N,P,Q,R,S,T,V,W,Y,O,U",
        "Amino-acid symbols"
    ),
    AlphabetPreset(
        "{protein-extended}", "A,C,D,E,F,G,H,I,K,L,M,N,P,Q,R,S,T,V,W,Y,O,U,B,J,X,Z",
        "Amino-acid symbols including ambiguity codes"
    ),
    AlphabetPreset(
        "{proteinV1}", "A,C,D,E,F,G,H,I,K,L,M,N,P,Q,R,S,T,V,W,Y",
        "The 20 canonical amino acids (legacy SEGUID v1)"
    ),
)

# Substitution order is the registry order above.
PREDEFINED_ALPHABETS: Mapping = MappingProxyType({p.name: p for p in _PRESETS})


def get_alphabet_preset(name: str) -> AlphabetPreset:
    """
    Look up a predefined alphabet.

    Args:
        name: Preset name, with or without braces ("DNA" or "{DNA}")

    Returns:
        AlphabetPreset instance

    Raises:
        InvalidAlphabetSpecError: If the preset is not known
    """
    key = name if name.startswith("{") else "{" + name + "}"
    if key not in PREDEFINED_ALPHABETS:
        raise InvalidAlphabetSpecError(
            name,
            reason=f"Unknown predefined alphabet. Available: {', '.join(PREDEFINED_ALPHABETS)}"
        )
    return PREDEFINED_ALPHABETS[key]


def list_alphabet_presets() -> List[AlphabetPreset]:
    """Return all predefined alphabets in registry order."""
    return list(PREDEFINED_ALPHABETS.values())


def expand_alphabet_spec(spec: str) -> str:
    """Replace every predefined token in ``spec`` with its expansion (one pass)."""
    for preset in PREDEFINED_ALPHABETS.values():
        spec = spec.replace(preset.name, preset.spec)
    return spec


class AlphabetTable(Mapping):
    """
    Read-only mapping from a symbol to the symbols it can pair with.

    Examples:
        >>> table = AlphabetTable.from_spec("{DNA}")
        >>> table["A"], table["G"]
        ('T', 'C')

        >>> AlphabetTable.from_spec("{RNA},GU")["G"]   # wobble pair accumulates
        'CU'

        >>> AlphabetTable.from_spec("{protein}")["A"]
        ''
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping):
        self._entries: Dict[str, str] = dict(entries)

    @classmethod
    def from_spec(cls, spec: str) -> "AlphabetTable":
        """
        Parse an alphabet specification.

        Args:
            spec: Comma-separated components and/or predefined tokens

        Returns:
            AlphabetTable

        Raises:
            InvalidAlphabetSpecError: If a component is not 1 or 2 characters
                wide, or components have different widths
        """
        expanded = expand_alphabet_spec(spec)
        entries: Dict[str, str] = {}
        expected_width = None

        for component in expanded.split(","):
            width = len(component)
            if expected_width is None:
                expected_width = width
            elif width != expected_width:
                raise InvalidAlphabetSpecError(
                    component, reason="Inconsistent specification length"
                )

            if width == 1:
                entries[component] = ""
            elif width == 2:
                first, second = component
                entries[first] = entries.get(first, "") + second
                entries[second] = entries.get(second, "") + first
            else:
                raise InvalidAlphabetSpecError(component)

        return cls(entries)

    def with_symbols(self, extra: Mapping) -> "AlphabetTable":
        """Return a new table with ``extra`` entries added where missing."""
        entries = dict(self._entries)
        for symbol, complements in extra.items():
            entries.setdefault(symbol, complements)
        return AlphabetTable(entries)

    @property
    def symbols(self) -> frozenset:
        return frozenset(self._entries)

    def complements(self, symbol: str) -> str:
        return self._entries.get(symbol, "")

    def __getitem__(self, symbol: str) -> str:
        return self._entries[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AlphabetTable({self._entries!r})"


def build_table(spec: str) -> AlphabetTable:
    """Shorthand for ``AlphabetTable.from_spec``."""
    return AlphabetTable.from_spec(spec)


def assert_well_formed(table: Mapping) -> None:
    """
    Check that every key of ``table`` occurs in some complement string.

    A table built from pair components is symmetric and always passes;
    non-pairing (width-1) tables fail.

    Raises:
        MalformedAlphabetError: Listing keys that never appear as values
    """
    values = set()
    for complements in table.values():
        values.update(complements)

    unknown = [key for key in table if key not in values]
    if unknown:
        raise MalformedAlphabetError(unknown)
