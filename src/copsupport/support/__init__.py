from . import cop_support
from . import stacking
from . import wrench_cone
