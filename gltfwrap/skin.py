"""Skins: joints, skeleton roots and inverse-bind matrices.

A document is the parsed JSON of a glTF asset, a ``dict``. Accessors are
given as their index into the document's ``accessors`` array.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from gltfwrap.scene import Node


def _checked_index(root: Mapping[str, Any], key: str, index: int) -> int:
    count = len(root.get(key, ()))
    if not 0 <= index < count:
        raise IndexError(f"{key} index {index} out of range ({count} {key})")
    return index


def _node(root: Mapping[str, Any], index: int) -> Node:
    _checked_index(root, "nodes", index)
    return Node(root, index, root["nodes"][index])


@dataclass(frozen=True)
class Skin:
    """Joints and matrices defining a skin."""

    root: Mapping[str, Any] = field(repr=False, compare=False)
    index: int
    json: Mapping[str, Any] = field(repr=False)

    def inverse_bind_matrices(self) -> int | None:
        """The accessor index holding the 4x4 inverse-bind matrices.

        ``None`` means each matrix is the identity, i.e. the inverse-bind
        matrices were pre-applied.
        """
        index = self.json.get("inverseBindMatrices")
        if index is None:
            return None
        return _checked_index(self.root, "accessors", index)

    def joints(self) -> list[Node]:
        """The skeleton nodes used as joints in this skin, in order."""
        return [_node(self.root, i) for i in self.json.get("joints", ())]

    def skeleton(self) -> Node | None:
        """The node used as the skeleton root, if any."""
        index = self.json.get("skeleton")
        if index is None:
            return None
        return _node(self.root, index)

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")

    def name(self) -> str | None:
        """Optional user-defined name."""
        return self.json.get("name")


def skins(root: Mapping[str, Any]) -> list[Skin]:
    """All skins of a document."""
    return [Skin(root, i, skin) for i, skin in enumerate(root.get("skins", ()))]