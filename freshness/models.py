"""Data model for SNI 2729-2013 organoleptic samples.

Field names on the wire (CSV headers, dict keys) follow the Indonesian
standard sheet: ``Mata``, ``Insang``, ``Lendir``, ``Daging``, ``Bau``,
``Tekstur``, ``Skor``, ``Kategori``. Python attributes use the lowercase
spelling of the same words.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

# Wire names of the six sensory parameters, in canonical order.
PARAMETER_FIELDS: Tuple[str, ...] = ("Mata", "Insang", "Lendir", "Daging", "Bau", "Tekstur")

# Sample keys that are never parameter observations.
METADATA_KEYS = frozenset({"id", "Kategori", "Skor", "timestamp", "fishName"})

# Value 4 is reserved by SNI 2729-2013 and never counts towards a score.
EXCLUDED_VALUE = 4
MIN_VALUE = 1
MAX_VALUE = 9

_WIRE_TO_ATTR = {
    **{name: name.lower() for name in PARAMETER_FIELDS},
    "Skor": "skor",
    "Kategori": "kategori",
    "id": "id",
    "timestamp": "timestamp",
    "fishName": "fish_name",
}


def attribute_for(key: str) -> str:
    """Map a wire key (``Mata``) or attribute name (``mata``) to the attribute name.

    Raises:
        KeyError: If the key names no sample field
    """
    if key in _WIRE_TO_ATTR:
        return _WIRE_TO_ATTR[key]
    if key in _WIRE_TO_ATTR.values():
        return key
    raise KeyError(f"Unknown sample field: {key!r}")


def is_scorable(value: Any) -> bool:
    """True when ``value`` may contribute to a freshness score (1-9, not 4)."""
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return MIN_VALUE <= value <= MAX_VALUE and value != EXCLUDED_VALUE


@dataclass(frozen=True)
class FishParameter:
    """The six sensory observations of one fish.

    ``None`` means the parameter has not been observed yet, which is
    different from the disallowed value 4.
    """
    mata: Optional[int] = None
    insang: Optional[int] = None
    lendir: Optional[int] = None
    daging: Optional[int] = None
    bau: Optional[int] = None
    tekstur: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FishParameter":
        """Build from a mapping keyed by wire names or attribute names."""
        values = {}
        for name in PARAMETER_FIELDS:
            if name in data:
                values[name.lower()] = data[name]
            elif name.lower() in data:
                values[name.lower()] = data[name.lower()]
        return cls(**values)

    def items(self) -> Iterator[Tuple[str, Optional[int]]]:
        """(wire name, value) pairs in canonical order."""
        for name in PARAMETER_FIELDS:
            yield name, getattr(self, name.lower())

    def to_dict(self) -> Dict[str, Optional[int]]:
        return dict(self.items())


@dataclass(frozen=True)
class FishSample:
    """A scored sample.

    Created only through ``calculate_freshness`` so that ``skor`` always
    matches the parameter values and ``kategori`` always matches ``skor``.

    Attributes:
        skor: Mean of the scorable parameter values, two decimals
        kategori: Baik, Sedang, Buruk or Invalid
        id: Opaque unique identifier
        timestamp: Creation time in epoch milliseconds
        fish_name: Optional label given by the user
    """
    mata: Optional[int]
    insang: Optional[int]
    lendir: Optional[int]
    daging: Optional[int]
    bau: Optional[int]
    tekstur: Optional[int]
    skor: float
    kategori: str
    id: str
    timestamp: int
    fish_name: Optional[str] = None

    @property
    def parameters(self) -> FishParameter:
        return FishParameter(
            mata=self.mata,
            insang=self.insang,
            lendir=self.lendir,
            daging=self.daging,
            bau=self.bau,
            tekstur=self.tekstur,
        )

    def get(self, key: str) -> Any:
        """Field value by wire key or attribute name."""
        return getattr(self, attribute_for(key))

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation; ``fishName`` is present only when set."""
        data: Dict[str, Any] = self.parameters.to_dict()
        data["Skor"] = self.skor
        data["Kategori"] = self.kategori
        data["id"] = self.id
        data["timestamp"] = self.timestamp
        if self.fish_name is not None:
            data["fishName"] = self.fish_name
        return data
