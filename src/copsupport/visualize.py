import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .support.cop_support import MAX


def cop_from_wrench(support, wrench):
    """
    CoP of a 6D wrench [f; tau] in the local frame of the patch, (x, y).
    """
    wrench = np.asarray(wrench, dtype=float)
    R = support.R
    f_local = R.T @ wrench[:3]
    tau_local = R.T @ wrench[3:]
    if f_local[2] <= 0.0:
        raise ValueError("wrench has no positive normal force, CoP undefined")
    return np.array([-tau_local[1] / f_local[2], tau_local[0] / f_local[2]])


def plot_support_region(support, ax=None, show=True, wrench=None):
    """
    Draw the patch of a CoPSupport in its local frame.

    The box is centered at the origin, length along local x and width along
    local y. If `wrench` is given its CoP is marked (green inside, red outside).
    """
    length, width = support.box
    if length >= MAX or width >= MAX:
        raise ValueError("cannot plot an unbounded support region")

    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))

    bottom_left = (-length / 2.0, -width / 2.0)
    rect = Rectangle(bottom_left, width=length, height=width,
                     fill=False, edgecolor='red', linewidth=2)
    ax.add_patch(rect)
    ax.plot(0.0, 0.0, '+', color='k', ms=8)

    if wrench is not None:
        cop = cop_from_wrench(support, wrench)
        color = 'tab:green' if support.contains(wrench) else 'tab:red'
        ax.plot(cop[0], cop[1], 'o', color=color, ms=6, label='CoP')
        ax.legend(loc='upper right')

    n = support.nsurf
    ax.set_title(f"nsurf = ({n[0]:.3f}, {n[1]:.3f}, {n[2]:.3f})")
    margin = 0.25 * max(length, width)
    ax.set_xlim(-length / 2.0 - margin, length / 2.0 + margin)
    ax.set_ylim(-width / 2.0 - margin, width / 2.0 + margin)
    ax.set_aspect('equal')
    ax.set_xlabel("x [m]")
    ax.set_ylabel("y [m]")
    ax.grid(True)

    if show:
        plt.show()
    return ax
