from enum import Enum
from typing import Any, Dict, Generic, Iterable, Mapping, Tuple, Type, TypeVar

from gpucaps.utils.spec_loader import SpecTableError

E = TypeVar("E", bound=Enum)


class SubstringResolver(Generic[E]):
    """Ordered (substring key, enum value) table.

    The first entry whose key occurs in the input wins; no match yields ``unknown``.
    Keys must be unique. With ``unique_values`` each enum value may also be listed
    under one key only, which catches a model accidentally keyed twice.
    """

    def __init__(self, entries: Iterable[Tuple[str, E]], unknown: E, unique_values: bool = False):
        self.unknown = unknown
        self.entries: Tuple[Tuple[str, E], ...] = tuple(entries)

        seen_keys: Dict[str, E] = {}
        seen_values: Dict[E, str] = {}
        for key, value in self.entries:
            if not key:
                raise SpecTableError(f"Empty key for {value}")
            if key in seen_keys:
                raise SpecTableError(f"Key '{key}' maps to both {seen_keys[key]} and {value}")
            if value == unknown:
                raise SpecTableError(f"Key '{key}' maps to the unknown value {unknown}")
            if unique_values and value in seen_values:
                raise SpecTableError(f"{value} is listed under both '{seen_values[value]}' and '{key}'")
            seen_keys[key] = value
            seen_values.setdefault(value, key)

    @classmethod
    def from_name_map(cls, name_map: Mapping[str, Any], enum_cls: Type[E], unknown: E):
        """Builds a one-key-per-model resolver from a spec ``name_map`` of key -> enum member name."""
        entries = []
        for key, member_name in name_map.items():
            try:
                entries.append((key, enum_cls[member_name]))
            except KeyError:
                raise SpecTableError(f"Unknown {enum_cls.__name__} member '{member_name}' for key '{key}'") from None
        return cls(entries, unknown, unique_values=True)

    def resolve(self, text: str) -> E:
        for key, value in self.entries:
            if key in text:
                return value
        return self.unknown

    def __len__(self) -> int:
        return len(self.entries)
