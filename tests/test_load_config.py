"""Tests for the YAML configuration."""
import logging

import numpy as np
import pytest

from copsupport import CoPSupport, cop_config, load_config


def test_packaged_defaults():
    assert cop_config.unit_tolerance == pytest.approx(1e-12)
    assert cop_config.up_axis == [0.0, 0.0, 1.0]
    assert cop_config.print_precision == 6


def test_unknown_key():
    with pytest.raises(AttributeError):
        cop_config.friction_coefficient


def test_custom_tolerance(tmp_path, caplog):
    path = tmp_path / "loose.yaml"
    path.write_text(
        "unit_tolerance: 1.0e-2\n"
        "up_axis: [0.0, 0.0, 1.0]\n"
        "contain_tolerance: 0.0\n"
        "print_precision: 3\n"
        "min_normal_norm: 1.0e-9\n"
    )
    config = load_config(path)
    assert config.get("missing", 5) == 5

    support = CoPSupport(config=config)
    with caplog.at_level(logging.WARNING):
        support.nsurf = [0.0, 0.0, 1.001]
    # within the loose tolerance the normal is kept as given
    assert caplog.records == []
    assert support.nsurf[2] == 1.001
    assert np.allclose(support.R, np.eye(3))
