"""Tests for plotting a support region."""
import matplotlib.pyplot as plt
import numpy as np
import pytest
from numpy.testing import assert_allclose

from copsupport import CoPSupport
from copsupport.visualize import cop_from_wrench, plot_support_region


def test_cop_from_wrench(foot):
    cop = cop_from_wrench(foot, [0.0, 0.0, 100.0, 2.0, -3.0, 0.0])
    assert_allclose(cop, [0.03, 0.02])


def test_cop_needs_normal_force(foot):
    with pytest.raises(ValueError):
        cop_from_wrench(foot, [0.0, 0.0, -1.0, 0.0, 0.0, 0.0])


def test_plot_draws_patch(foot):
    ax = plot_support_region(foot, show=False, wrench=[0.0, 0.0, 100.0, 1.0, 1.0, 0.0])
    assert len(ax.patches) == 1
    rect = ax.patches[0]
    assert rect.get_width() == pytest.approx(0.2)
    assert rect.get_height() == pytest.approx(0.1)
    plt.close(ax.figure)


def test_unbounded_cannot_be_plotted():
    with pytest.raises(ValueError):
        plot_support_region(CoPSupport(), show=False)
