from .base import AbstractException
from .exceptions import (
    FrozenCollectorsError,
    ImproperUsageError,
    ParamError,
    InvalidParamError,
    UnsupportedOperationError,
)


__all__ = (
    'AbstractException',
    'FrozenCollectorsError',
    'ImproperUsageError',
    'ParamError',
    'InvalidParamError',
    'UnsupportedOperationError',
)
