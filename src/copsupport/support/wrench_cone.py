from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class WrenchConeSource(Protocol):
    """
    Wrench-based support (friction, normal force limits and CoP) that
    CoPSupport.from_wrench_cone can narrow down to its CoP rows.

    Nothing here is validated: the source must already be consistent with
    its own frame and box.
    """

    @property
    def A(self) -> NDArray[np.float64]:
        """(4, 6) CoP inequality matrix."""

    @property
    def ub(self) -> NDArray[np.float64]:
        """(4,) upper bounds."""

    @property
    def lb(self) -> NDArray[np.float64]:
        """(4,) lower bounds."""

    @property
    def R(self) -> NDArray[np.float64]:
        """(3, 3) orientation."""

    @property
    def nsurf(self) -> NDArray[np.float64]:
        """(3,) surface normal."""

    @property
    def box(self) -> NDArray[np.float64]:
        """(2,) length and width."""
