import pytest

from terrain.objmodel import (
    Face,
    build_model,
    load_model,
    parse_faces,
    parse_normals,
    parse_obj,
    parse_vertices,
)

QUAD = """# sample
o Quad
v 1.0 2.0 3.0
v 4.0 5.0 6.0
v 7.0 8.0 9.0
v 10.0 11.0 12.0
vn 0.0 1.0 0.0
vn 1.0 0.0 0.0
vt 0.0 0.0
s 0
f 1/1/1 2/1/1 3/1/2 4/1/2
"""

TWO_QUADS = QUAD + "f 4/1/2 3/1/2 2/1/1 1/1/1\n"


def test_parse_vertices():
    verts = parse_vertices(QUAD)
    assert verts == {
        0: [1.0, 2.0, 3.0],
        1: [4.0, 5.0, 6.0],
        2: [7.0, 8.0, 9.0],
        3: [10.0, 11.0, 12.0],
    }


def test_parse_normals():
    assert parse_normals(QUAD) == {0: [0.0, 1.0, 0.0], 1: [1.0, 0.0, 0.0]}


def test_parse_faces_single_quad():
    faces = parse_faces(QUAD)
    assert faces == [Face(0, [1, 2, 3, 4], [1, 1, 2, 2])]


def test_parse_faces_two_quads():
    faces = parse_faces(TWO_QUADS)
    assert [f.id for f in faces] == [0, 1]
    assert faces[1].indices == [4, 3, 2, 1]
    assert faces[1].normals == [2, 2, 1, 1]


def test_no_faces_without_smoothing_marker():
    assert parse_faces(QUAD.replace("s 0", "s 1")) == []


def test_invalid_number_raises():
    with pytest.raises(ValueError):
        parse_vertices(QUAD.replace("2.0", "abc"))


def test_invalid_index_raises():
    with pytest.raises(ValueError):
        parse_faces(QUAD.replace("f 1/1/1", "f x/1/1"))


def test_build_model_interleaves_positions_and_normals():
    verts, norms, faces = parse_obj(QUAD)
    model = build_model(verts, norms, faces)
    assert len(model.vertices) == 6 * len(faces[0].indices)
    assert model.indices == list(range(len(faces[0].indices)))
    v, n = verts[0], norms[0]
    assert model.vertices[:6] == [v[0], n[0], v[2], n[2], v[1], n[1]]
    v, n = verts[3], norms[1]
    assert model.vertices[18:24] == [v[0], n[0], v[2], n[2], v[1], n[1]]


def test_build_model_missing_vertex_raises():
    verts, norms, _ = parse_obj(QUAD)
    with pytest.raises(ValueError):
        build_model(verts, norms, [Face(0, [9], [1])])


def test_build_model_missing_normal_raises():
    verts, norms, _ = parse_obj(QUAD)
    with pytest.raises(ValueError):
        build_model(verts, norms, [Face(0, [1, 2], [1])])


def test_load_model_matches_parsed_text(tmp_path):
    path = tmp_path / "quad.obj"
    path.write_text(TWO_QUADS)
    assert load_model(path) == build_model(*parse_obj(TWO_QUADS))


def test_load_model_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_model(tmp_path / "absent.obj")