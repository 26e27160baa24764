"""
Shared test fixtures for CoP support tests.
"""
import sys
from dataclasses import dataclass
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
from scipy.spatial.transform import Rotation as R

# Add src/ to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from copsupport import CoPSupport


@dataclass
class FakeWrenchCone:
    """Precomputed wrench-based support, deliberately not self-consistent."""
    A: np.ndarray
    ub: np.ndarray
    lb: np.ndarray
    R: np.ndarray
    nsurf: np.ndarray
    box: np.ndarray


@pytest.fixture
def foot():
    """A 20x10cm flat foot sole."""
    return CoPSupport(R=np.eye(3), box=[0.2, 0.1])


@pytest.fixture
def rotations():
    """A handful of random orthonormal matrices."""
    return R.random(8, random_state=42).as_matrix()


@pytest.fixture
def wrench_cone():
    rng = np.random.default_rng(7)
    return FakeWrenchCone(
        A=rng.normal(size=(4, 6)),
        ub=np.array([0.1, 0.2, 0.3, 0.4]),
        lb=np.array([-1.0, -2.0, -3.0, -4.0]),
        R=R.from_euler('xyz', [0.1, -0.2, 0.3]).as_matrix(),
        nsurf=np.array([0.0, 0.6, 0.8]),
        box=np.array([0.25, 0.12]),
    )
