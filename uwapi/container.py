"""
Navigable wrapper around parsed JSON.

A JSONContainer holds any JSON value (dict, list, str, number, bool or None)
and lets callers walk into it by key or index without caring which one it is:

    c = JSONContainer({"data": [{"subject": "PHYS"}]})
    c["data"][0]["subject"].value   # "PHYS"
    c.search("data", 0, "subject")  # same, or None when missing
    c.path("meta.status")           # dotted form of search()
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Optional, Union

import pandas as pd

PathPart = Union[str, int]


class JSONContainer:
    """Untyped, read-only view over a parsed JSON value."""

    __slots__ = ("_data",)

    def __init__(self, data: Any = None) -> None:
        object.__setattr__(self, "_data", data)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("JSONContainer is read-only.")

    @property
    def value(self) -> Any:
        """The wrapped JSON value."""
        return self._data

    # descent

    def _step(self, part: PathPart) -> Any:
        data = self._data
        if isinstance(data, dict):
            if not isinstance(part, str):
                raise KeyError(part)
            return data[part]
        if isinstance(data, list):
            if isinstance(part, bool) or not isinstance(part, int):
                raise KeyError(part)
            try:
                return data[part]
            except IndexError as e:
                raise KeyError(part) from e
        raise KeyError(part)

    def __getitem__(self, part: PathPart) -> "JSONContainer":
        return JSONContainer(self._step(part))

    def search(self, *hierarchy: PathPart) -> Optional["JSONContainer"]:
        """Descend through `hierarchy`; return None if any step is missing."""
        current = self
        for part in hierarchy:
            try:
                current = current[part]
            except KeyError:
                return None
        return current

    def path(self, dotted: str) -> Optional["JSONContainer"]:
        """
        search() with a dotted path. Parts made only of digits index into
        arrays, e.g. ``"data.0.subject"``.
        """
        parts: List[PathPart] = []
        for p in dotted.split("."):
            parts.append(int(p) if p.isdigit() else p)
        current = self
        for part in parts:
            if isinstance(part, int) and isinstance(current.value, dict):
                part = str(part)
            nxt = current.search(part)
            if nxt is None:
                return None
            current = nxt
        return current

    def exists(self, *hierarchy: PathPart) -> bool:
        return self.search(*hierarchy) is not None

    def get(self, part: PathPart, default: Any = None) -> Any:
        """Raw value at `part`, or `default` when it is missing."""
        try:
            return self._step(part)
        except KeyError:
            return default

    # children

    def children(self) -> List["JSONContainer"]:
        """Elements of an array, or values of an object in key order."""
        if isinstance(self._data, list):
            return [JSONContainer(v) for v in self._data]
        if isinstance(self._data, dict):
            return [JSONContainer(v) for v in self._data.values()]
        raise TypeError(f"{type(self._data).__name__} value has no children.")

    def children_map(self) -> Dict[str, "JSONContainer"]:
        if not isinstance(self._data, dict):
            raise TypeError(f"{type(self._data).__name__} value is not a JSON object.")
        return {k: JSONContainer(v) for k, v in self._data.items()}

    def __iter__(self) -> Iterator["JSONContainer"]:
        return iter(self.children())

    def __len__(self) -> int:
        if isinstance(self._data, (list, dict, str)):
            return len(self._data)
        raise TypeError(f"{type(self._data).__name__} value has no length.")

    def __contains__(self, item: object) -> bool:
        if isinstance(self._data, (list, dict)):
            return item in self._data
        return False

    # primitives

    def is_null(self) -> bool:
        return self._data is None

    def as_str(self) -> str:
        if not isinstance(self._data, str):
            raise TypeError(f"Expected a JSON string, got {type(self._data).__name__}.")
        return self._data

    def as_int(self) -> int:
        if isinstance(self._data, bool) or not isinstance(self._data, (int, float)):
            raise TypeError(f"Expected a JSON number, got {type(self._data).__name__}.")
        if isinstance(self._data, float) and not self._data.is_integer():
            raise ValueError(f"JSON number {self._data!r} is not an integer.")
        return int(self._data)

    def as_float(self) -> float:
        if isinstance(self._data, bool) or not isinstance(self._data, (int, float)):
            raise TypeError(f"Expected a JSON number, got {type(self._data).__name__}.")
        return float(self._data)

    def as_bool(self) -> bool:
        if not isinstance(self._data, bool):
            raise TypeError(f"Expected a JSON boolean, got {type(self._data).__name__}.")
        return self._data

    # conversion

    def to_frame(self, *hierarchy: PathPart) -> pd.DataFrame:
        """
        Flatten the array of records at `hierarchy` into a DataFrame.

        Nested objects become dotted columns (pandas.json_normalize). A single
        object is treated as a one-row table.
        """
        target = self.search(*hierarchy)
        if target is None:
            raise KeyError("/".join(str(p) for p in hierarchy))
        records = target.value
        if isinstance(records, dict):
            records = [records]
        if not isinstance(records, list):
            raise TypeError(f"Cannot build a table from a {type(records).__name__} value.")
        return pd.json_normalize(records)

    def string(self, indent: Optional[int] = None) -> str:
        """Serialise back to JSON text."""
        return json.dumps(self._data, indent=indent)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JSONContainer):
            return self._data == other._data
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        text = self.string()
        if len(text) > 80:
            text = text[:77] + "..."
        return f"JSONContainer({text})"
