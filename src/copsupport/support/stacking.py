import logging

import numpy as np
from scipy.linalg import block_diag

logger = logging.getLogger(__name__)


def stack_constraints(supports):
    """
    Stack the CoP constraints of several contacts.

    supports: sequence of CoPSupport, one per contact, in the order the
    contact wrenches appear in the decision vector.
    Returns (A, ub, lb) with A block diagonal of shape (4k, 6k).
    """
    supports = list(supports)
    if not supports:
        return np.zeros((0, 0)), np.zeros(0), np.zeros(0)

    A = block_diag(*[s.A for s in supports])
    ub = np.concatenate([s.ub for s in supports])
    lb = np.concatenate([s.lb for s in supports])
    logger.debug("Stacked %d CoP supports into a %dx%d matrix", len(supports), *A.shape)
    return A, ub, lb
