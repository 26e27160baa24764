import logging

import numpy as np

from ..utils.load_config import cop_config
from ..utils.rotation_utils import as_matrix, as_vector, is_unit, rotation_from_two_vectors

# stands in for an unbounded box dimension and an inactive lower bound
MAX = np.finfo(float).max


def _read_only(arr):
    view = arr.copy()
    view.flags.writeable = False
    return view


class CoPSupport:
    """
    Rectangular Center-of-Pressure support region of a flat contact.

    The region is described by the inequalities
        lb <= A @ w <= ub
    where w = [f; tau] is the 6D contact wrench. Each row bounds the CoP
    along one local axis of the patch by half of the box dimension, scaled
    by the normal force.

    Construct from nothing (flat unbounded patch), from an orientation R or
    from a surface normal nsurf. Setting R, nsurf or box re-derives the
    dependent quantities right away.
    """

    def __init__(self, R=None, box=None, nsurf=None, config=None, logger=None):
        if R is not None and nsurf is not None:
            raise ValueError("pass either R or nsurf, not both")
        self._setup(config, logger)

        self._A = np.zeros((4, 6))
        self._ub = np.zeros(4)
        self._lb = np.zeros(4)

        if nsurf is not None:
            n = self._checked_normal(nsurf, warn=False)
            if n is None:
                self.logger.warning("normal has zero length, using the up axis instead")
                n = self.up.copy()
            self._nsurf = n
            self._R = rotation_from_two_vectors(self._nsurf, self.up)
        elif R is not None:
            self._R = as_matrix(R, (3, 3), "R")
            self._nsurf = self._R.T @ self.up
        else:
            self._R = np.eye(3)
            self._nsurf = self.up.copy()

        if box is None:
            self._box = np.array([MAX, MAX])
        else:
            self._box = self._checked_box(box, warn=False)

        self.update()

    @classmethod
    def from_wrench_cone(cls, cone, config=None, logger=None):
        """
        Take the CoP rows of a wrench-based support as they are.

        Matrix, bounds, frame and box are copied without re-deriving them, so
        `cone` has to be consistent already.
        """
        support = cls.__new__(cls)
        support._setup(config, logger)
        support._A = as_matrix(cone.A, (4, 6), "A")
        support._ub = as_vector(cone.ub, 4, "ub")
        support._lb = as_vector(cone.lb, 4, "lb")
        support._R = as_matrix(cone.R, (3, 3), "R")
        support._nsurf = as_vector(cone.nsurf, 3, "nsurf")
        support._box = as_vector(cone.box, 2, "box")
        return support

    def _setup(self, config, logger):
        self.config = config if config is not None else cop_config
        self.logger = logger or logging.getLogger(__name__)
        self.up = as_vector(self.config.up_axis, 3, "up_axis")

    def update(self):
        """Recompute A, ub and lb from the current orientation and box."""
        self._A = np.zeros((4, 6))
        self._ub = np.zeros(4)
        self._lb = np.full(4, -MAX)

        # [0 0 -W  1  0;
        #  0 0 -W -1  0;
        #  0 0 -L  0  1;
        #  0 0 -L  0 -1]   (in the contact frame)
        L = self._box[0] / 2.0
        W = self._box[1] / 2.0
        c0, c1, c2 = self._R[:, 0], self._R[:, 1], self._R[:, 2]
        self._A[0] = np.concatenate((-W * c2, c0))
        self._A[1] = np.concatenate((-W * c2, -c0))
        self._A[2] = np.concatenate((-L * c2, c1))
        self._A[3] = np.concatenate((-L * c2, -c1))

    def _checked_box(self, box, warn=True):
        box = as_vector(box, 2, "box")
        for i, name in enumerate(("length", "width")):
            if not box[i] > 0.0:
                if warn:
                    self.logger.warning(
                        "box %s has to be a positive value, got %s; set to max. float", name, box[i])
                box[i] = MAX
            elif not np.isfinite(box[i]):
                # +inf means unbounded
                box[i] = MAX
        return box

    def _checked_normal(self, nsurf, warn=True):
        """Unit copy of `nsurf`, or None if it is too short to give a direction."""
        n = as_vector(nsurf, 3, "nsurf")
        if is_unit(n, self.config.unit_tolerance):
            return n
        norm = np.linalg.norm(n)
        if not norm > self.config.min_normal_norm or not np.isfinite(norm):
            return None
        if warn:
            self.logger.warning("normal is not an unitary vector, then we normalized it")
        return n / norm

    @property
    def A(self):
        return _read_only(self._A)

    @property
    def ub(self):
        return _read_only(self._ub)

    @property
    def lb(self):
        return _read_only(self._lb)

    @property
    def R(self):
        """Orientation of the contact surface."""
        return _read_only(self._R)

    @R.setter
    def R(self, R):
        self._R = as_matrix(R, (3, 3), "R")
        self._nsurf = self._R.T @ self.up
        self.update()

    @property
    def nsurf(self):
        """Unit surface normal."""
        return _read_only(self._nsurf)

    @nsurf.setter
    def nsurf(self, nsurf):
        n = self._checked_normal(nsurf)
        if n is None:
            self.logger.warning("normal has zero length, keeping the previous one %s", self._nsurf)
            return
        self._nsurf = n
        self._R = rotation_from_two_vectors(self._nsurf, self.up)
        self.update()

    @property
    def box(self):
        """(length, width) of the patch."""
        return _read_only(self._box)

    @box.setter
    def box(self, box):
        self._box = self._checked_box(box)
        self.update()

    def residual(self, wrench):
        """A @ wrench for a 6D wrench [f; tau]."""
        return self._A @ as_vector(wrench, 6, "wrench")

    def contains(self, wrench, tol=None):
        """True if the CoP of `wrench` lies inside the patch."""
        if tol is None:
            tol = self.config.contain_tolerance
        r = self.residual(wrench)
        return bool(np.all(r <= self._ub + tol) and np.all(r >= self._lb - tol))

    def __str__(self):
        with np.printoptions(precision=self.config.print_precision, suppress=True):
            rows = str(self._R).replace("\n", "\n            ")
            return (f"         R: {rows}\n"
                    f"   (nsurf): {self._nsurf}\n"
                    f"       box: {self._box}\n")

    def __repr__(self):
        return f"CoPSupport(nsurf={self._nsurf.tolist()}, box={self._box.tolist()})"
