"""Vertex index and joint index data, with widening casts.

Index data comes as unsigned 8, 16 or 32 bit integers and joint data as
groups of four unsigned 8 or 16 bit integers. The readers here keep the
component type alongside the values. They can widen every variant to the
largest type, which fits any value.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator


class _UnsignedType(enum.Enum):
    @property
    def bits(self) -> int:
        return self.value

    @property
    def max(self) -> int:
        """Largest value the type can hold."""
        return (1 << self.value) - 1

    def check(self, value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected an integer, got {value!r}")
        if not 0 <= value <= self.max:
            raise ValueError(f"{value} does not fit in {self.name.lower()}")
        return value


class IndexType(_UnsignedType):
    """Component type of vertex index data."""

    U8 = 8
    U16 = 16
    U32 = 32


class JointType(_UnsignedType):
    """Component type of joint index data."""

    U8 = 8
    U16 = 16


@dataclass(frozen=True)
class ReadIndices:
    """Vertex draw sequence stored with a given component type."""

    kind: IndexType
    values: tuple[int, ...]

    def __init__(self, kind: IndexType, values: Iterable[int]) -> None:
        kind = IndexType(kind)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "values", tuple(kind.check(v) for v in values))

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def into_u32(self) -> Iterator[int]:
        """Indices widened to u32, which can hold any index."""
        return (IndexType.U32.check(v) for v in self.values)


@dataclass(frozen=True)
class ReadJoints:
    """Joint indices, four per vertex, stored with a given component type."""

    kind: JointType
    values: tuple[tuple[int, int, int, int], ...]

    def __init__(self, kind: JointType, values: Iterable[Iterable[int]]) -> None:
        kind = JointType(kind)
        joints = []
        for group in values:
            group = tuple(kind.check(v) for v in group)
            if len(group) != 4:
                raise ValueError(f"joints come in groups of 4, got {len(group)}")
            joints.append(group)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "values", tuple(joints))

    def __iter__(self) -> Iterator[tuple[int, int, int, int]]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def into_u16(self) -> Iterator[tuple[int, int, int, int]]:
        """Joints widened to u16, which can hold any joint index."""
        return (
            tuple(JointType.U16.check(v) for v in group)  # type: ignore[misc]
            for group in self.values
        )