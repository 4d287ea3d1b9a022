"""
Objet valeur pour les metadonnees cle/valeur d'une directive.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Optional


class Metadata(Mapping[str, str]):
    """
    Mapping immutable cle -> valeur non vide.

    Les cles sont uniques ; les valeurs vides ne sont jamais stockees.
    Comparable par valeur avec n'importe quel autre Mapping.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values = MappingProxyType(
            {k: v for k, v in (values or {}).items() if v and v.strip()}
        )

    @classmethod
    def empty(cls) -> "Metadata":
        """Retourne des metadonnees vides."""
        return cls()

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return f"Metadata({dict(self._values)!r})"
