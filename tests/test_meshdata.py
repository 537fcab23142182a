import numpy as np
import pytest

from liwengine.meshdata import MeshData, PrimitiveType, SubMesh

QUAD_OBJ = """\
# a quad
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1 4/4/1
"""

TWO_OBJECTS_OBJ = """\
o first
v 0 0 0
v 1 0 0
v 0 1 0
f 1 2 3
o second
v 0 0 1
v 1 0 1
v 0 1 1
f -3 -2 -1
"""


@pytest.fixture
def quad_path(tmp_path):
    path = tmp_path / "quad.obj"
    path.write_text(QUAD_OBJ, encoding="utf-8")
    return path


def test_new_mesh_is_invalid():
    mesh = MeshData()
    assert not mesh.is_valid()
    assert mesh.triangle_count() == 0


def test_cube_sizes():
    cube = MeshData.create_cube()
    assert cube.is_valid()
    assert cube.positions.shape == (24, 3)
    assert len(cube.indices) == 36
    assert cube.triangle_count() == 12
    assert cube.submeshes == [SubMesh(0, 36)]
    assert cube.primitive_type == PrimitiveType.TRIANGLES


def test_cube_vertices_on_unit_cube():
    cube = MeshData.create_cube()
    assert np.allclose(np.abs(cube.positions), 0.5)
    assert np.allclose(cube.colours, 1.0)
    assert cube.texcoords.min() >= 0.0 and cube.texcoords.max() <= 1.0


def test_cube_normals_unit_and_axis_aligned():
    cube = MeshData.create_cube()
    assert np.allclose(np.linalg.norm(cube.normals, axis=1), 1.0)
    assert np.allclose(np.sort(np.abs(cube.normals), axis=1), [0.0, 0.0, 1.0])


def test_cube_face_vertices_share_normal():
    cube = MeshData.create_cube()
    for face in range(6):
        block = cube.normals[face * 4 : face * 4 + 4]
        assert np.allclose(block, block[0])


def test_cube_tangents_unit_with_handedness():
    cube = MeshData.create_cube()
    assert cube.tangents.shape == (24, 4)
    assert np.allclose(np.linalg.norm(cube.tangents[:, :3], axis=1), 1.0)
    assert set(np.unique(cube.tangents[:, 3])) <= {-1.0, 1.0}


def test_plane_values():
    plane = MeshData.create_plane()
    assert plane.triangle_count() == 2
    assert plane.indices.tolist() == [0, 3, 1, 2, 3, 0]
    assert np.allclose(plane.normals, [0.0, 1.0, 0.0])
    assert np.allclose(plane.tangents, [1.0, 0.0, 0.0, 1.0])


def test_plane_regenerated_normals_along_y():
    plane = MeshData.create_plane()
    assert plane.generate_normals() is True
    assert np.allclose(np.abs(plane.normals), [0.0, 1.0, 0.0])


def test_generate_tangents_without_texcoords_returns_false():
    plane = MeshData.create_plane()
    plane.texcoords = np.zeros((0, 2), dtype=np.float32)
    before = plane.tangents.copy()
    assert plane.generate_tangents() is False
    assert np.array_equal(plane.tangents, before)


def test_generate_on_invalid_mesh_raises():
    mesh = MeshData()
    with pytest.raises(RuntimeError):
        mesh.generate_normals()
    with pytest.raises(RuntimeError):
        mesh.generate_tangents()


def test_unload_resets():
    cube = MeshData.create_cube()
    cube.unload()
    assert not cube.is_valid()
    assert len(cube.positions) == 0
    assert len(cube.indices) == 0
    assert cube.submeshes == []


def test_unload_invalid_raises():
    with pytest.raises(RuntimeError):
        MeshData().unload()


def test_load_obj_quad(quad_path):
    mesh = MeshData()
    mesh.load_obj(quad_path)
    assert mesh.is_valid()
    assert mesh.triangle_count() == 2
    assert mesh.indices.tolist() == list(range(6))
    assert mesh.submeshes == [SubMesh(0, 6)]
    assert np.allclose(mesh.positions[:3], [[0, 0, 0], [1, 0, 0], [1, 1, 0]])
    assert np.allclose(mesh.normals, [0.0, 0.0, 1.0])
    assert len(mesh.colours) == 0


def test_load_obj_flips_v_by_default(quad_path):
    flipped = MeshData()
    flipped.load_obj(quad_path)
    plain = MeshData()
    plain.load_obj(quad_path, flip_texcoord_v=False)
    assert np.allclose(flipped.texcoords[:, 0], plain.texcoords[:, 0])
    assert np.allclose(flipped.texcoords[:, 1], 1.0 - plain.texcoords[:, 1])


def test_load_obj_twice_raises(quad_path):
    mesh = MeshData()
    mesh.load_obj(quad_path)
    with pytest.raises(RuntimeError):
        mesh.load_obj(quad_path)


def test_load_obj_objects_become_submeshes(tmp_path):
    path = tmp_path / "two.obj"
    path.write_text(TWO_OBJECTS_OBJ, encoding="utf-8")
    mesh = MeshData()
    mesh.load_obj(path)
    assert mesh.submeshes == [SubMesh(0, 3), SubMesh(3, 6)]
    assert np.allclose(mesh.positions[3:, 2], 1.0)


def test_load_obj_without_faces_raises(tmp_path):
    path = tmp_path / "empty.obj"
    path.write_text("v 0 0 0\n", encoding="utf-8")
    with pytest.raises(ValueError):
        MeshData().load_obj(path)


def test_load_obj_bad_index_raises(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text("v 0 0 0\nv 1 0 0\nf 1 2 5\n", encoding="utf-8")
    with pytest.raises(ValueError):
        MeshData().load_obj(path)


def test_load_obj_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        MeshData().load_obj(tmp_path / "missing.obj")


def test_loaded_mesh_tangents_invariants(quad_path):
    mesh = MeshData()
    mesh.load_obj(quad_path)
    assert mesh.generate_tangents() is True
    assert mesh.tangents.shape == (6, 4)
    assert np.allclose(np.linalg.norm(mesh.tangents[:, :3], axis=1), 1.0)
    assert set(np.unique(mesh.tangents[:, 3])) <= {-1.0, 1.0}