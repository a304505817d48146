"""Textures, samplers and texture references.

A document is the parsed JSON of a glTF asset, a ``dict``. Images are given
as their index into the document's ``images`` array.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping

_DEFAULT_SAMPLER: Mapping[str, Any] = {}
_TEXTURE_TRANSFORM = "KHR_texture_transform"


class MagFilter(enum.IntEnum):
    """Magnification filter."""

    NEAREST = 9728
    LINEAR = 9729


class MinFilter(enum.IntEnum):
    """Minification filter."""

    NEAREST = 9728
    LINEAR = 9729
    NEAREST_MIPMAP_NEAREST = 9984
    LINEAR_MIPMAP_NEAREST = 9985
    NEAREST_MIPMAP_LINEAR = 9986
    LINEAR_MIPMAP_LINEAR = 9987


class WrappingMode(enum.IntEnum):
    """Texture coordinate wrapping mode."""

    CLAMP_TO_EDGE = 33071
    MIRRORED_REPEAT = 33648
    REPEAT = 10497


def _checked_index(root: Mapping[str, Any], key: str, index: int) -> int:
    count = len(root.get(key, ()))
    if not 0 <= index < count:
        raise IndexError(f"{key} index {index} out of range ({count} {key})")
    return index


@dataclass(frozen=True)
class Sampler:
    """Texture sampler properties for filtering and wrapping modes.

    ``index`` is ``None`` for the default sampler.
    """

    root: Mapping[str, Any] = field(repr=False, compare=False)
    index: int | None
    json: Mapping[str, Any] = field(repr=False)

    @classmethod
    def _default(cls, root: Mapping[str, Any]) -> Sampler:
        return cls(root, None, _DEFAULT_SAMPLER)

    def mag_filter(self) -> MagFilter | None:
        """Magnification filter, if given."""
        value = self.json.get("magFilter")
        return None if value is None else MagFilter(value)

    def min_filter(self) -> MinFilter | None:
        """Minification filter, if given."""
        value = self.json.get("minFilter")
        return None if value is None else MinFilter(value)

    def wrap_s(self) -> WrappingMode:
        """``s`` wrapping mode; repeat by default."""
        return WrappingMode(self.json.get("wrapS", WrappingMode.REPEAT))

    def wrap_t(self) -> WrappingMode:
        """``t`` wrapping mode; repeat by default."""
        return WrappingMode(self.json.get("wrapT", WrappingMode.REPEAT))

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")

    def name(self) -> str | None:
        """Optional user-defined name."""
        return self.json.get("name")


@dataclass(frozen=True)
class Texture:
    """A texture and its sampler."""

    root: Mapping[str, Any] = field(repr=False, compare=False)
    index: int
    json: Mapping[str, Any] = field(repr=False)

    def sampler(self) -> Sampler:
        """The sampler used by this texture, or the default sampler."""
        index = self.json.get("sampler")
        if index is None:
            return Sampler._default(self.root)
        _checked_index(self.root, "samplers", index)
        return Sampler(self.root, index, self.root["samplers"][index])

    def source(self) -> int:
        """The index of the image used by this texture."""
        index = self.json.get("source")
        if index is None:
            raise ValueError("texture has no source image")
        return _checked_index(self.root, "images", index)

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")

    def name(self) -> str | None:
        """Optional user-defined name."""
        return self.json.get("name")


@dataclass(frozen=True)
class TextureTransform:
    """Offset, rotation and scale applied to UV coordinates."""

    json: Mapping[str, Any] = field(repr=False)

    def offset(self) -> list[float]:
        """Offset of the UV origin as a factor of the texture dimensions."""
        return [float(v) for v in self.json.get("offset", (0.0, 0.0))]

    def rotation(self) -> float:
        """Counter-clockwise rotation of the UVs, in radians."""
        return float(self.json.get("rotation", 0.0))

    def scale(self) -> list[float]:
        """Scale factor applied to the UV components."""
        return [float(v) for v in self.json.get("scale", (1.0, 1.0))]

    def tex_coord(self) -> int | None:
        """Overriding ``TEXCOORD`` set index, if supplied."""
        return self.json.get("texCoord")

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")


@dataclass(frozen=True)
class TextureInfo:
    """A reference to a texture."""

    texture_ref: Texture
    json: Mapping[str, Any] = field(repr=False)

    def tex_coord(self) -> int:
        """The set index of the texture's ``TEXCOORD`` attribute."""
        return self.json.get("texCoord", 0)

    def texture(self) -> Texture:
        """The referenced texture."""
        return self.texture_ref

    def texture_transform(self) -> TextureTransform | None:
        """The ``KHR_texture_transform`` data, if present."""
        extensions = self.json.get("extensions") or {}
        data = extensions.get(_TEXTURE_TRANSFORM)
        return None if data is None else TextureTransform(data)

    def extras(self) -> Any:
        """Optional application specific data."""
        return self.json.get("extras")


def textures(root: Mapping[str, Any]) -> list[Texture]:
    """All textures of a document."""
    return [Texture(root, i, tex) for i, tex in enumerate(root.get("textures", ()))]


def samplers(root: Mapping[str, Any]) -> list[Sampler]:
    """All explicitly defined samplers of a document."""
    return [Sampler(root, i, s) for i, s in enumerate(root.get("samplers", ()))]