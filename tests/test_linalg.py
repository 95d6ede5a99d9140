from __future__ import annotations

import math

import pytest

from mazecam.linalg import Mat4, Vec3


def test_cross_follows_right_hand_rule() -> None:
    assert Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 0.0, 1.0)
    assert Vec3(0.0, 0.0, -1.0).cross(Vec3(0.0, 1.0, 0.0)) == Vec3(1.0, 0.0, 0.0)


def test_norm_leaves_zero_vector_alone() -> None:
    assert Vec3().norm() == Vec3(0.0, 0.0, 0.0)
    assert math.isclose(Vec3(3.0, 4.0, 0.0).norm().mag(), 1.0)


def test_flat_drops_height() -> None:
    assert Vec3(1.0, 5.0, -2.0).flat() == Vec3(1.0, 0.0, -2.0)


def test_to_gl_is_column_major() -> None:
    gl = Mat4([float(i) for i in range(16)]).to_gl()

    assert gl.shape == (4, 4)
    assert gl.dtype.name == "float32"
    assert gl.ravel()[0:4].tolist() == [0.0, 4.0, 8.0, 12.0]
    assert gl.ravel()[12:16].tolist() == [3.0, 7.0, 11.0, 15.0]


def test_view_matrix_uploads_translation_in_last_column() -> None:
    eye = Vec3(1.0, 2.0, 3.0)
    gl = Mat4.look_at(eye, Vec3(1.0, 2.0, 0.0), Vec3(0.0, 1.0, 0.0)).to_gl()

    assert gl.ravel()[12:15].tolist() == [-1.0, -2.0, -3.0]


def test_look_at_puts_target_on_negative_z() -> None:
    eye = Vec3(2.0, 1.0, 2.0)
    view = Mat4.look_at(eye, Vec3(2.0, 1.0, -3.0), Vec3(0.0, 1.0, 0.0))

    assert (view @ eye).isclose(Vec3())
    assert (view @ Vec3(2.0, 1.0, -3.0)).isclose(Vec3(0.0, 0.0, -5.0))


def test_perspective_maps_near_and_far_planes() -> None:
    p = Mat4.perspective(math.radians(45.0), 1.5, 0.1, 100.0)

    assert (p @ Vec3(0.0, 0.0, -0.1)).z == pytest.approx(-1.0)
    assert (p @ Vec3(0.0, 0.0, -100.0)).z == pytest.approx(1.0)


@pytest.mark.parametrize(
    "aspect, near, far",
    ((0.0, 0.1, 10.0), (1.0, 0.0, 10.0), (1.0, 1.0, 1.0), (1.0, -1.0, 10.0)),
)
def test_perspective_rejects_bad_planes(aspect: float, near: float, far: float) -> None:
    with pytest.raises(ValueError):
        Mat4.perspective(1.0, aspect, near, far)


def test_mat4_rejects_wrong_size() -> None:
    with pytest.raises(ValueError):
        Mat4([0.0] * 9)
