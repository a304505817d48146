"""Scenes, the node hierarchy and node transforms.

A document is the parsed JSON of a glTF asset, a ``dict``. Skins are given
as their index into the document's ``skins`` array.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, Union

from gltfwrap.math import Matrix3, Matrix4, Quaternion, Vector3
from gltfwrap.mesh import Mesh

_IDENTITY_TRANSLATION = (0.0, 0.0, 0.0)
_IDENTITY_ROTATION = (0.0, 0.0, 0.0, 1.0)
_IDENTITY_SCALE = (1.0, 1.0, 1.0)


def _signum(value: float) -> float:
    if math.isnan(value):
        return value
    return math.copysign(1.0, value)


@dataclass(frozen=True)
class MatrixTransform:
    """A transform given as a 4x4 matrix in column-major order."""

    columns: list[list[float]]

    def matrix(self) -> list[list[float]]:
        """The matrix, as four columns of four values."""
        return [list(column) for column in self.columns]

    def decomposed(self) -> tuple[list[float], list[float], list[float]]:
        """Translation, rotation ``[x, y, z, w]`` and scale extracted from the matrix."""
        m = self.columns
        translation = [m[3][0], m[3][1], m[3][2]]
        basis = Matrix3.from_columns(
            m[0][0], m[0][1], m[0][2],
            m[1][0], m[1][1], m[1][2],
            m[2][0], m[2][1], m[2][2],
        )
        sx = basis.x.magnitude()
        sy = basis.y.magnitude()
        sz = _signum(basis.determinant()) * basis.z.magnitude()
        rotation_matrix = Matrix3(
            basis.x * (1.0 / sx),
            basis.y * (1.0 / sy),
            basis.z * (1.0 / sz),
        )
        r = Quaternion.from_matrix(rotation_matrix)
        rotation = [r.v.x, r.v.y, r.v.z, r.s]
        return translation, rotation, [sx, sy, sz]


@dataclass(frozen=True)
class DecomposedTransform:
    """A transform given as translation, rotation and scale."""

    translation: list[float] = field(default_factory=lambda: list(_IDENTITY_TRANSLATION))
    rotation: list[float] = field(default_factory=lambda: list(_IDENTITY_ROTATION))
    scale: list[float] = field(default_factory=lambda: list(_IDENTITY_SCALE))

    def matrix(self) -> list[list[float]]:
        """The matrix ``translation * rotation * scale`` as four columns."""
        t, r, s = self.translation, self.rotation, self.scale
        translation = Matrix4.from_translation(Vector3(t[0], t[1], t[2]))
        rotation = Matrix4.from_quaternion(Quaternion.from_parts(r[3], r[0], r[1], r[2]))
        scale = Matrix4.from_nonuniform_scale(s[0], s[1], s[2])
        return (translation * rotation * scale).as_array()

    def decomposed(self) -> tuple[list[float], list[float], list[float]]:
        """Translation, rotation ``[x, y, z, w]`` and scale."""
        return list(self.translation), list(self.rotation), list(self.scale)


Transform = Union[MatrixTransform, DecomposedTransform]


def _item(root: Mapping[str, Any], key: str, index: int) -> Any:
    items = root.get(key, ())
    if not 0 <= index < len(items):
        raise IndexError(f"{key} index {index} out of range ({len(items)} {key})")
    return items[index]


def _node(root: Mapping[str, Any], index: int) -> Node:
    return Node(root, index, _item(root, "nodes", index))


@dataclass(frozen=True)
class Node:
    """A node in the node hierarchy."""

    root: Mapping[str, Any] = field(repr=False, compare=False)
    index: int
    json: Mapping[str, Any] = field(repr=False)

    def children(self) -> list[Node]:
        """The node's children, in order."""
        return [_node(self.root, i) for i in self.json.get("children") or ()]

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")

    def mesh(self) -> Mesh | None:
        """The mesh referenced by this node, if any."""
        index = self.json.get("mesh")
        if index is None:
            return None
        return Mesh(self.root, index, _item(self.root, "meshes", index))

    def skin(self) -> int | None:
        """The index of the skin referenced by this node, if any."""
        index = self.json.get("skin")
        if index is None:
            return None
        _item(self.root, "skins", index)
        return index

    def transform(self) -> Transform:
        """The node's local transform."""
        m = self.json.get("matrix")
        if m is not None:
            if len(m) != 16:
                raise ValueError(f"node matrix needs 16 values, got {len(m)}")
            values = [float(v) for v in m]
            return MatrixTransform([values[i:i + 4] for i in range(0, 16, 4)])
        return DecomposedTransform(
            _floats(self.json.get("translation"), _IDENTITY_TRANSLATION),
            _floats(self.json.get("rotation"), _IDENTITY_ROTATION),
            _floats(self.json.get("scale"), _IDENTITY_SCALE),
        )

    def weights(self) -> list[float] | None:
        """The weights of the instantiated morph target."""
        return self.json.get("weights")

    def name(self) -> str | None:
        """Optional user-defined name."""
        return self.json.get("name")


def _floats(values: Sequence[float] | None, default: Sequence[float]) -> list[float]:
    if values is None:
        return list(default)
    if len(values) != len(default):
        raise ValueError(f"expected {len(default)} values, got {len(values)}")
    return [float(v) for v in values]


@dataclass(frozen=True)
class Scene:
    """The root nodes of a scene."""

    root: Mapping[str, Any] = field(repr=False, compare=False)
    index: int
    json: Mapping[str, Any] = field(repr=False)

    def nodes(self) -> list[Node]:
        """The root nodes of the scene."""
        return [_node(self.root, i) for i in self.json.get("nodes") or ()]

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")

    def name(self) -> str | None:
        """Optional user-defined name."""
        return self.json.get("name")


def nodes(root: Mapping[str, Any]) -> list[Node]:
    """All nodes of a document."""
    return [Node(root, i, node) for i, node in enumerate(root.get("nodes", ()))]


def scenes(root: Mapping[str, Any]) -> list[Scene]:
    """All scenes of a document."""
    return [Scene(root, i, scene) for i, scene in enumerate(root.get("scenes", ()))]