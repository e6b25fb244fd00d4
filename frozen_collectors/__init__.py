__appname__ = "frozen-collectors"
__version__ = "0.1.0"

from .collector import Collector, collect  # noqa
from .collectors import *  # noqa
from .exceptions import *  # noqa
from .sequence import UnmodifiableList  # noqa
