import pytest

from almondshell.geometry import Mesh, Quad

QUAD_VERTICES = [
    -0.5, -0.5, 0.0, 0.0, 0.0,
    0.5, -0.5, 0.0, 1.0, 0.0,
    0.5, 0.5, 0.0, 1.0, 1.0,
    -0.5, 0.5, 0.0, 0.0, 1.0,
]
QUAD_INDICES = [0, 1, 2, 2, 3, 0]


def test_quad_counts():
    quad = Quad(QUAD_VERTICES, QUAD_INDICES)
    assert quad.vertex_count == 4
    assert quad.index_count == len(QUAD_INDICES)


def test_quad_vertices_of_first_and_third():
    quad = Quad(QUAD_VERTICES, QUAD_INDICES)
    assert quad.vertices_of(0) == ((-0.5, -0.5, 0.0), (0.0, 0.0))
    assert quad.vertices_of(2) == ((0.5, 0.5, 0.0), (1.0, 1.0))


def test_quad_vertices_round_trip():
    quad = Quad(QUAD_VERTICES, QUAD_INDICES)
    flat = []
    for i in range(quad.vertex_count):
        position, tex = quad.vertices_of(i)
        flat.extend(position)
        flat.extend(tex)
    assert flat == QUAD_VERTICES


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_quad_vertices_of_out_of_range(index):
    quad = Quad(QUAD_VERTICES, QUAD_INDICES)
    with pytest.raises(IndexError):
        quad.vertices_of(index)


def test_quad_vao_flag():
    quad = Quad(QUAD_VERTICES, QUAD_INDICES)
    assert quad.has_vao() is False
    quad.vao = 7
    assert quad.has_vao() is True


def test_quad_texture_default_and_set():
    quad = Quad(QUAD_VERTICES, QUAD_INDICES)
    assert quad.texture_id == 0
    quad.texture_id = 3
    assert quad.texture_id == 3


@pytest.mark.parametrize("vertices,indices", [([], [0]), (QUAD_VERTICES, [])])
def test_quad_rejects_empty(vertices, indices):
    with pytest.raises(ValueError):
        Quad(vertices, indices)


def test_mesh_counts_use_four_floats_per_vertex():
    vertices = [float(i) for i in range(8)]
    mesh = Mesh(vertices, [0, 1])
    assert mesh.vertex_count == len(vertices) // Mesh.FLOATS_PER_VERTEX
    assert mesh.index_count == 2


def test_mesh_vao_flag():
    mesh = Mesh([], [])
    assert mesh.has_vao() is False
    mesh.vao = 1
    assert mesh.has_vao() is True


def test_mesh_copies_input():
    vertices = [1.0, 2.0, 3.0, 4.0]
    mesh = Mesh(vertices, [0])
    vertices.append(5.0)
    assert mesh.vertices == (1.0, 2.0, 3.0, 4.0)