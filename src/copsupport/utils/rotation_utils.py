import numpy as np
from scipy.spatial.transform import Rotation as R


def as_vector(v, size, name="vector"):
    """Return `v` as a flat float array of length `size`, or raise ValueError."""
    arr = np.array(v, dtype=float).reshape(-1)
    if arr.shape != (size,):
        raise ValueError(f"{name} must have {size} elements, got shape {np.shape(v)}")
    return arr


def as_matrix(m, shape, name="matrix"):
    arr = np.asarray(m, dtype=float)
    if arr.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {arr.shape}")
    return arr.copy()


def is_unit(v, tol):
    """|v.v - 1| <= tol"""
    return abs(float(np.dot(v, v)) - 1.0) <= tol


def rotation_from_two_vectors(a, b):
    """
    Minimal rotation matrix Q such that Q @ a is parallel to b.
    a, b: 3-vectors, not necessarily unit.
    """
    a = as_vector(a, 3, "a")
    b = as_vector(b, 3, "b")
    a = a / np.linalg.norm(a)
    b = b / np.linalg.norm(b)

    axis = np.cross(a, b)
    s = np.linalg.norm(axis)
    c = float(np.clip(np.dot(a, b), -1.0, 1.0))

    if s < 1e-12:
        if c > 0:
            return np.eye(3)
        # antiparallel: half turn about any axis orthogonal to a
        helper = np.array([1.0, 0.0, 0.0]) if abs(a[0]) < 0.9 else np.array([0.0, 1.0, 0.0])
        axis = np.cross(a, helper)
        axis /= np.linalg.norm(axis)
        return R.from_rotvec(np.pi * axis).as_matrix()

    angle = np.arctan2(s, c)
    return R.from_rotvec(axis / s * angle).as_matrix()
