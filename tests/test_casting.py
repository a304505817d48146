import pytest

from gltfwrap.casting import IndexType, JointType, ReadIndices, ReadJoints


@pytest.mark.parametrize("kind", list(IndexType))
def test_indices_into_u32_keeps_values(kind):
    values = [0, 1, 2, 2, 3, 0]
    reader = ReadIndices(kind, values)
    assert list(reader.into_u32()) == values


def test_indices_len_and_iter():
    reader = ReadIndices(IndexType.U16, [5, 6, 7])
    assert len(reader) == 3
    assert list(reader) == [5, 6, 7]


def test_indices_max_values_widen():
    reader = ReadIndices(IndexType.U8, [255])
    assert list(reader.into_u32()) == [255]
    reader = ReadIndices(IndexType.U16, [65535])
    assert list(reader.into_u32()) == [65535]


@pytest.mark.parametrize(
    ("kind", "limit"),
    [(IndexType.U8, 255), (IndexType.U16, 65535), (IndexType.U32, 4294967295)],
)
def test_index_type_max_is_the_accepted_limit(kind, limit):
    assert kind.max == limit
    assert list(ReadIndices(kind, [limit]).into_u32()) == [limit]
    with pytest.raises(ValueError):
        ReadIndices(kind, [limit + 1])


def test_indices_overflow_rejected():
    with pytest.raises(ValueError):
        ReadIndices(IndexType.U8, [256])
    with pytest.raises(ValueError):
        ReadIndices(IndexType.U16, [-1])


def test_indices_non_integer_rejected():
    with pytest.raises(TypeError):
        ReadIndices(IndexType.U32, [1.5])


def test_indices_empty():
    reader = ReadIndices(IndexType.U32, [])
    assert len(reader) == 0
    assert list(reader.into_u32()) == []


def test_indices_cast_length_matches():
    reader = ReadIndices(IndexType.U8, range(10))
    assert len(list(reader.into_u32())) == len(reader)


@pytest.mark.parametrize("kind", list(JointType))
def test_joints_into_u16_keeps_values(kind):
    groups = [(0, 1, 2, 3), (4, 5, 6, 7)]
    reader = ReadJoints(kind, groups)
    assert list(reader.into_u16()) == groups


def test_joints_len_and_iter():
    reader = ReadJoints(JointType.U8, [[1, 2, 3, 4]])
    assert len(reader) == 1
    assert list(reader) == [(1, 2, 3, 4)]


def test_joints_u8_max_widens():
    reader = ReadJoints(JointType.U8, [(255, 0, 255, 0)])
    assert list(reader.into_u16()) == [(255, 0, 255, 0)]


def test_joints_wrong_group_size():
    with pytest.raises(ValueError):
        ReadJoints(JointType.U16, [(1, 2, 3)])


def test_joints_overflow_rejected():
    with pytest.raises(ValueError):
        ReadJoints(JointType.U8, [(0, 0, 0, 256)])


def test_joint_type_has_no_u32():
    with pytest.raises(ValueError):
        JointType(32)