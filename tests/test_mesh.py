import json

import pytest

from gltfwrap.mesh import (
    Bounds,
    Mesh,
    Mode,
    MorphTarget,
    Semantic,
    meshes,
)

MINIMAL_ACCESSOR_MIN_MAX = """
{
  "scenes": [{"nodes": [0]}],
  "nodes": [{"mesh": 0}],
  "meshes": [{"primitives": [{"attributes": {"POSITION": 1}, "indices": 0}]}],
  "buffers": [{"uri": "data.bin", "byteLength": 44}],
  "bufferViews": [
    {"buffer": 0, "byteOffset": 0, "byteLength": 6, "target": 34963},
    {"buffer": 0, "byteOffset": 8, "byteLength": 36, "target": 34962}
  ],
  "accessors": [
    {"bufferView": 0, "byteOffset": 0, "componentType": 5123, "count": 3,
     "type": "SCALAR", "max": [2], "min": [0]},
    {"bufferView": 1, "byteOffset": 0, "componentType": 5126, "count": 3,
     "type": "VEC3", "max": [1.0, 1.01, 0.02], "min": [-0.03, -0.04, -0.05]}
  ],
  "asset": {"version": "2.0"}
}
"""


@pytest.fixture
def document():
    return {
        "accessors": [{"count": 3}, {"count": 3, "min": [0, 0, 0], "max": [1, 2, 3]},
                      {"count": 3}, {"count": 3}, {"count": 3}],
        "meshes": [
            {
                "name": "cube",
                "weights": [0.5, 0.25],
                "extras": {"tag": "a"},
                "primitives": [
                    {
                        "attributes": {"POSITION": 1, "NORMAL": 2, "TEXCOORD_0": 3},
                        "indices": 0,
                        "mode": 1,
                        "extras": {"p": 1},
                        "targets": [{"POSITION": 4}, {"NORMAL": 3, "TANGENT": 2}],
                    },
                    {"attributes": {"POSITION": 1}},
                ],
            },
            {"primitives": []},
        ],
    }


def test_accessor_bounds():
    gltf = json.loads(MINIMAL_ACCESSOR_MIN_MAX)
    mesh = meshes(gltf)[0]
    prim = mesh.primitives()[0]
    assert prim.bounding_box() == Bounds(min=[-0.03, -0.04, -0.05], max=[1.0, 1.01, 0.02])


@pytest.mark.parametrize(
    "name, expected",
    [
        ("POSITION", Semantic("POSITION")),
        ("NORMAL", Semantic("NORMAL")),
        ("TANGENT", Semantic("TANGENT")),
        ("COLOR_0", Semantic("COLOR", 0)),
        ("TEXCOORD_1", Semantic("TEXCOORD", 1)),
        ("JOINTS_2", Semantic("JOINTS", 2)),
        ("WEIGHTS_10", Semantic("WEIGHTS", 10)),
        ("_CUSTOM", Semantic("_CUSTOM")),
    ],
)
def test_semantic_parse_and_str_round_trip(name, expected):
    semantic = Semantic.parse(name)
    assert semantic == expected
    assert str(semantic) == name


@pytest.mark.parametrize("name", ["POSITION_0", "COLOR", "TEXCOORD_x", "FOO", "COLOR_-1", ""])
def test_semantic_parse_rejects_invalid(name):
    with pytest.raises(ValueError):
        Semantic.parse(name)


def test_meshes_and_indices(document):
    found = meshes(document)
    assert [m.index for m in found] == [0, 1]
    assert found[1].primitives() == []
    assert [p.index for p in found[0].primitives()] == [0, 1]


def test_mesh_properties(document):
    mesh = meshes(document)[0]
    assert mesh.name() == "cube"
    assert mesh.weights() == [0.5, 0.25]
    assert mesh.extras() == {"tag": "a"}
    other = meshes(document)[1]
    assert other.name() is None
    assert other.weights() is None
    assert other.extras() is None


def test_primitive_get_and_indices(document):
    first, second = meshes(document)[0].primitives()
    assert first.get(Semantic("NORMAL")) == 2
    assert first.get("TEXCOORD_0") == 3
    assert first.get(Semantic("COLOR", 0)) is None
    assert first.indices() == 0
    assert second.indices() is None


def test_primitive_attributes(document):
    prim = meshes(document)[0].primitives()[0]
    assert prim.attributes() == [
        (Semantic("POSITION"), 1),
        (Semantic("NORMAL"), 2),
        (Semantic("TEXCOORD", 0), 3),
    ]


def test_primitive_mode(document):
    first, second = meshes(document)[0].primitives()
    assert first.mode() is Mode.LINES
    assert second.mode() is Mode.TRIANGLES


def test_primitive_morph_targets(document):
    first, second = meshes(document)[0].primitives()
    assert first.morph_targets() == [
        MorphTarget(positions=4),
        MorphTarget(normals=3, tangents=2),
    ]
    assert second.morph_targets() == []


def test_primitive_extras(document):
    first, second = meshes(document)[0].primitives()
    assert first.extras() == {"p": 1}
    assert second.extras() is None


def test_bounding_box_from_document(document):
    prim = meshes(document)[0].primitives()[1]
    assert prim.bounding_box() == Bounds([0.0, 0.0, 0.0], [1.0, 2.0, 3.0])


def test_bounding_box_without_position_raises():
    root = {"accessors": [], "meshes": [{"primitives": [{"attributes": {}}]}]}
    prim = meshes(root)[0].primitives()[0]
    with pytest.raises(ValueError):
        prim.bounding_box()


def test_accessor_out_of_range_raises():
    root = {"accessors": [{}], "meshes": [{"primitives": [{"attributes": {"POSITION": 5}}]}]}
    prim = meshes(root)[0].primitives()[0]
    with pytest.raises(IndexError):
        prim.get("POSITION")


def test_mesh_equality_ignores_root(document):
    copy = json.loads(json.dumps(document))
    assert meshes(document)[0] == Mesh({}, 0, copy["meshes"][0])