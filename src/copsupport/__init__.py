# copsupport/__init__.py
"""
COPSUPPORT: Center-of-Pressure support regions for flat robot contacts.
"""

__version__ = "0.1.0"

from . import support
from . import utils

from .support.cop_support import CoPSupport, MAX
from .support.stacking import stack_constraints
from .support.wrench_cone import WrenchConeSource
from .utils.load_config import cop_config, load_config

__all__ = [
    "support",
    "utils",
    "CoPSupport",
    "MAX",
    "WrenchConeSource",
    "stack_constraints",
    "cop_config",
    "load_config",
]
