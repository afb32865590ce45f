"""Unit tests for triangles, meshes and OBJ loading."""

import logging
import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.transform import Matrix4x4
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.mesh import Triangle, TriangleMesh, load_obj

T_MIN = 0.001

SQUARE_OBJ = """\
# unit square in the z=-2 plane
v -1 -1 -2
v 1 -1 -2
v 1 1 -2
v -1 1 -2
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1 4/4/1
"""


@pytest.fixture
def triangle(gray):
    return Triangle(Vector3(-1, -1, -2), Vector3(1, -1, -2), Vector3(0, 1, -2), gray)


class TestTriangle:
    """Tests for Möller–Trumbore intersection."""

    def test_hit(self, triangle, gray):
        rec = triangle.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), T_MIN, math.inf)
        assert rec.t == pytest.approx(2.0)
        assert rec.point == Vector3(0, 0, -2)
        assert rec.normal == Vector3(0, 0, 1)
        assert rec.front_face
        assert rec.material is gray

    def test_miss_outside_edges(self, triangle):
        assert triangle.hit(Ray(Vector3(2, 0, 0), Vector3(0, 0, -1)), T_MIN, math.inf) is None

    def test_parallel_ray_misses(self, triangle):
        assert triangle.hit(Ray(Vector3(0, 0, -2), Vector3(1, 0, 0)), T_MIN, math.inf) is None

    def test_back_face_flips_normal(self, triangle):
        rec = triangle.hit(Ray(Vector3(0, 0, -4), Vector3(0, 0, 1)), T_MIN, math.inf)
        assert not rec.front_face
        assert rec.normal == Vector3(0, 0, -1)

    def test_uv_interpolation(self, gray):
        tri = Triangle(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0), gray,
                       UV(0, 0), UV(1, 0), UV(0, 1))
        rec = tri.hit(Ray(Vector3(0.25, 0.5, 1), Vector3(0, 0, -1)), T_MIN, math.inf)
        assert rec.u == pytest.approx(0.25)
        assert rec.v == pytest.approx(0.5)

    def test_degenerate_triangle_rejected(self, gray):
        with pytest.raises(ValueError, match="zero area"):
            Triangle(Vector3(0, 0, 0), Vector3(1, 1, 1), Vector3(2, 2, 2), gray)

    def test_bounding_box_is_never_flat(self, triangle):
        box = triangle.bounding_box()
        assert box.extent(2) > 0
        assert box.minimum.x == pytest.approx(-1, abs=1e-3)


class TestLoadObj:
    """Tests for reading Wavefront OBJ meshes."""

    def test_quad_is_fan_triangulated(self, tmp_path, gray):
        path = tmp_path / "square.obj"
        path.write_text(SQUARE_OBJ)
        mesh = load_obj(str(path), gray)
        assert isinstance(mesh, TriangleMesh)
        assert len(mesh.triangles) == 2
        rec = mesh.hit(Ray(Vector3(0.5, -0.5, 0), Vector3(0, 0, -1)), T_MIN, math.inf)
        assert rec.t == pytest.approx(2.0)
        assert rec.u == pytest.approx(0.75)
        assert rec.v == pytest.approx(0.25)

    def test_negative_indices(self, tmp_path, gray):
        path = tmp_path / "tri.obj"
        path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3 -2 -1\n")
        mesh = load_obj(str(path), gray)
        assert len(mesh.triangles) == 1
        assert mesh.triangles[0].v1 == Vector3(1, 0, 0)

    def test_transform_is_applied(self, tmp_path, gray):
        path = tmp_path / "square.obj"
        path.write_text(SQUARE_OBJ)
        mesh = load_obj(str(path), gray, transform=Matrix4x4.translation(Vector3(0, 0, -3)))
        rec = mesh.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), T_MIN, math.inf)
        assert rec.t == pytest.approx(5.0)

    def test_degenerate_faces_are_skipped(self, tmp_path, gray, caplog):
        path = tmp_path / "mixed.obj"
        path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nv 2 0 0\n"
                        "f 1 2 3\nf 1 2 4\n")
        with caplog.at_level(logging.WARNING, logger="pathtracer.geometry.mesh"):
            mesh = load_obj(str(path), gray)
        assert len(mesh.triangles) == 1
        assert "zero-area" in caplog.text

    def test_malformed_line_reports_line_number(self, tmp_path, gray):
        path = tmp_path / "bad.obj"
        path.write_text("v 0 0 0\nv 1 0\n")
        with pytest.raises(ValueError, match="Line 2"):
            load_obj(str(path), gray)

    def test_out_of_range_index(self, tmp_path, gray):
        path = tmp_path / "bad.obj"
        path.write_text("v 0 0 0\nv 1 0 0\nf 1 2 3\n")
        with pytest.raises(ValueError, match="Line 3"):
            load_obj(str(path), gray)

    def test_missing_file(self, tmp_path, gray):
        with pytest.raises(FileNotFoundError):
            load_obj(str(tmp_path / "nope.obj"), gray)

    def test_mesh_without_triangles_rejected(self, tmp_path, gray):
        path = tmp_path / "empty.obj"
        path.write_text("v 0 0 0\n")
        with pytest.raises(ValueError, match="at least one triangle"):
            load_obj(str(path), gray)
