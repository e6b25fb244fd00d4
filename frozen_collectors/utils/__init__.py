from .builtins import *  # noqa
from .formatters import *  # noqa
from .strings import *  # noqa
