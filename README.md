# gltfwrap

Read-only Python views over a glTF 2.0 document that has already been parsed
into plain Python data, for example with `json.load`. The views look up
fields in the parsed `dict`, apply the glTF defaults, check cross-references
between arrays and raise `IndexError` or `ValueError` when a reference or a
value is out of range.

## Modules

- `gltfwrap.math`: small frozen dataclasses `Vector3`, `Vector4`, `Matrix3`,
  `Matrix4` and `Quaternion`. Matrices are stored as column vectors.
  `Matrix4` builds translation, non-uniform scale and quaternion rotation
  matrices and multiplies with `*`; `Quaternion.from_matrix` converts a
  rotation matrix back into a quaternion.
- `gltfwrap.scene`: `scenes(root)` and `nodes(root)` return `Scene` and `Node`
  views. `Node.transform()` returns either a `MatrixTransform` (when the node
  has a `matrix`) or a `DecomposedTransform` (translation, rotation, scale,
  with identity defaults). Both offer `matrix()` (four columns of four floats,
  as lists) and `decomposed()` (`translation`, `rotation` as `[x, y, z, w]`,
  `scale`). `Node.mesh()` returns a `Mesh`; `Node.skin()` returns the skin's
  index.
- `gltfwrap.mesh`: `meshes(root)` returns `Mesh` views; `Mesh.primitives()`
  returns `Primitive` views. A primitive gives its `attributes()` as
  `(Semantic, accessor index)` pairs, `get(semantic)`, `indices()`,
  `mode()` (a `Mode`, triangles by default), `morph_targets()` (a list of
  `MorphTarget`) and `bounding_box()` (a `Bounds` built from the `POSITION`
  accessor's `min` and `max`). `Semantic.parse("TEXCOORD_0")` parses an
  attribute name and `str()` turns it back.
- `gltfwrap.skin`: `skins(root)` returns `Skin` views with `joints()`,
  `skeleton()` (both as `Node`) and `inverse_bind_matrices()` (an accessor
  index or `None`).
- `gltfwrap.texture`: `textures(root)` and `samplers(root)`. `Texture.sampler()`
  falls back to a default `Sampler` (index `None`, wrap modes `REPEAT`) when
  the texture names none; `Texture.source()` is the image index.
  `TextureInfo` wraps a texture reference and exposes its
  `KHR_texture_transform` data as a `TextureTransform`. The enums are
  `MagFilter`, `MinFilter` and `WrappingMode`, with the glTF numeric values.
- `gltfwrap.casting`: `ReadIndices` (u8, u16 or u32 values, see `IndexType`)
  and `ReadJoints` (groups of four u8 or u16 values, see `JointType`). Values
  are range-checked on construction; `into_u32()` and `into_u16()` yield the
  values widened to the largest type.

## Usage

```python
import json

from gltfwrap.mesh import meshes
from gltfwrap.scene import scenes

with open("Box.gltf") as fh:
    root = json.load(fh)

for mesh in meshes(root):
    for primitive in mesh.primitives():
        for semantic, accessor in primitive.attributes():
            print(semantic, accessor)
        print(primitive.bounding_box())

for scene in scenes(root):
    for node in scene.nodes():
        translation, rotation, scale = node.transform().decomposed()
        print(node.name(), translation, rotation, scale)
```

Transforms convert in both directions:

```python
from gltfwrap.scene import DecomposedTransform, MatrixTransform

t = DecomposedTransform(
    translation=[1.0, 2.0, 3.0],
    rotation=[0.0, 0.0, 0.0, 1.0],
    scale=[2.0, 2.0, 2.0],
)
columns = t.matrix()  # four columns of four floats
translation, rotation, scale = MatrixTransform(columns).decomposed()
```

## What it does not do

The package works only on an already parsed JSON document. It does not open
`.gltf` or `.glb` files, resolve URIs, load buffers or images, or decode
accessor data from buffers: accessors, images and skins are handed back as
indices into the document, and `ReadIndices` / `ReadJoints` take values you
have already read. There are no views for accessors, buffers, images,
materials, cameras or animations, and no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```