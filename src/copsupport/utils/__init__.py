from . import load_config
from . import rotation_utils
