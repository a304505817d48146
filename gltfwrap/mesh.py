"""Meshes, their primitives, vertex attribute semantics and morph targets.

A document is the parsed JSON of a glTF asset, a ``dict``. Accessors are
given as their index into the document's ``accessors`` array.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Mapping, TypeVar

T = TypeVar("T")

_PLAIN_SEMANTICS = frozenset({"POSITION", "NORMAL", "TANGENT"})
_INDEXED_SEMANTICS = frozenset({"COLOR", "TEXCOORD", "JOINTS", "WEIGHTS"})


@dataclass(frozen=True)
class Bounds(Generic[T]):
    """The minimum and maximum values for a generic accessor."""

    min: T
    max: T


class Mode(enum.IntEnum):
    """The type of primitives to render."""

    POINTS = 0
    LINES = 1
    LINE_LOOP = 2
    LINE_STRIP = 3
    TRIANGLES = 4
    TRIANGLE_STRIP = 5
    TRIANGLE_FAN = 6


@dataclass(frozen=True)
class Semantic:
    """A vertex attribute semantic such as ``POSITION`` or ``TEXCOORD_0``.

    ``kind`` is the semantic name without its set number; ``set`` is the set
    number of indexed semantics and ``None`` otherwise. Application-specific
    semantics keep their full name, leading underscore included.
    """

    kind: str
    set: int | None = None

    @classmethod
    def parse(cls, name: str) -> Semantic:
        """Parse an attribute name as found in a primitive's ``attributes``."""
        if name.startswith("_") or name in _PLAIN_SEMANTICS:
            return cls(name)
        prefix, sep, digits = name.rpartition("_")
        if sep and prefix in _INDEXED_SEMANTICS and digits.isascii() and digits.isdigit():
            return cls(prefix, int(digits))
        raise ValueError(f"invalid attribute semantic: {name!r}")

    def __str__(self) -> str:
        if self.set is None:
            return self.kind
        return f"{self.kind}_{self.set}"


@dataclass(frozen=True)
class MorphTarget:
    """Accessor indices of the displacements of one morph target."""

    positions: int | None = None
    normals: int | None = None
    tangents: int | None = None


def _accessor(root: Mapping[str, Any], index: int) -> int:
    count = len(root.get("accessors", ()))
    if not 0 <= index < count:
        raise IndexError(f"accessor index {index} out of range ({count} accessors)")
    return index


@dataclass(frozen=True)
class Mesh:
    """A set of primitives to be rendered."""

    root: Mapping[str, Any] = field(repr=False, compare=False)
    index: int
    json: Mapping[str, Any] = field(repr=False)

    def primitives(self) -> list[Primitive]:
        """The geometry to be rendered with a material."""
        return [
            Primitive(self, i, prim)
            for i, prim in enumerate(self.json.get("primitives", ()))
        ]

    def weights(self) -> list[float] | None:
        """The weights to be applied to the morph targets."""
        return self.json.get("weights")

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")

    def name(self) -> str | None:
        """Optional user-defined name."""
        return self.json.get("name")


@dataclass(frozen=True)
class Primitive:
    """Geometry to be rendered with a given material."""

    mesh: Mesh
    index: int
    json: Mapping[str, Any] = field(repr=False)

    @property
    def _root(self) -> Mapping[str, Any]:
        return self.mesh.root

    def bounding_box(self) -> Bounds[list[float]]:
        """The bounds of the ``POSITION`` vertex attribute."""
        position = self.get(Semantic("POSITION"))
        if position is None:
            raise ValueError("primitive has no POSITION attribute")
        accessor = self._root["accessors"][position]
        bounds = []
        for key in ("min", "max"):
            values = accessor.get(key)
            if values is None or len(values) != 3:
                raise ValueError(f"POSITION accessor needs a 3-component {key!r}")
            bounds.append([float(v) for v in values])
        return Bounds(bounds[0], bounds[1])

    def get(self, semantic: Semantic | str) -> int | None:
        """The accessor index for the given semantic, if the primitive has one."""
        if isinstance(semantic, str):
            semantic = Semantic.parse(semantic)
        index = self.json.get("attributes", {}).get(str(semantic))
        return None if index is None else _accessor(self._root, index)

    def indices(self) -> int | None:
        """The accessor index holding the primitive indices, if provided."""
        index = self.json.get("indices")
        return None if index is None else _accessor(self._root, index)

    def attributes(self) -> list[tuple[Semantic, int]]:
        """The vertex attributes as ``(semantic, accessor index)`` pairs."""
        return [
            (Semantic.parse(name), _accessor(self._root, index))
            for name, index in self.json.get("attributes", {}).items()
        ]

    def mode(self) -> Mode:
        """The type of primitives to render; triangles by default."""
        return Mode(self.json.get("mode", Mode.TRIANGLES))

    def morph_targets(self) -> list[MorphTarget]:
        """The morph targets of the primitive."""
        return [self._morph_target(target) for target in self.json.get("targets") or ()]

    def _morph_target(self, target: Mapping[str, int]) -> MorphTarget:
        def lookup(key: str) -> int | None:
            index = target.get(key)
            return None if index is None else _accessor(self._root, index)

        return MorphTarget(lookup("POSITION"), lookup("NORMAL"), lookup("TANGENT"))

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")


def meshes(root: Mapping[str, Any]) -> list[Mesh]:
    """All meshes of a document."""
    return [Mesh(root, i, mesh) for i, mesh in enumerate(root.get("meshes", ()))]


def _iter_meshes(root: Mapping[str, Any]) -> Iterator[Mesh]:
    yield from meshes(root)