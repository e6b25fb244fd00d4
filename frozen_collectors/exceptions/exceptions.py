from frozen_collectors import utils

from .base import AbstractException
from .models import ExceptionAttribute, StringFormatChoices


__all__ = (
    'FrozenCollectorsError',
    'ImproperUsageError',
    'ParamError',
    'InvalidParamError',
    'UnsupportedOperationError',
)


class FrozenCollectorsError(AbstractException):
    """
    Base class for all exceptions raised by this package.
    """


class ImproperUsageError(FrozenCollectorsError):
    """
    Raised when a function is improperly used or a class is improperly
    initialized.

    Parameters:
    ----------
    klass: :obj:`str`, :obj:`type` or :obj:`object` (optional)
        The class, or an instance of the class, that the improper usage is
        related to.

        Default: None

    func: :obj:`str` or :obj:`lambda` (optional)
        The function, or the name of the function, that the improper usage is
        related to.

        Default: None
    """
    attributes = [
        ExceptionAttribute(name='klass', formatter=utils.obj_name),
        ExceptionAttribute(name='func', formatter=utils.obj_name)
    ]
    prefix = [
        StringFormatChoices(
            func=lambda instance: instance.klass is not None
            or instance.func is not None,
            isolated=True,
            choices=[
                "Improper usage of method {func} on class {klass}.",
                "Improper initialization of class {klass}.",
                "Improper usage of method {func}.",
            ]
        )
    ]


class ParamError(ImproperUsageError):
    """
    Raised when there is an error related to one or more parameters provided
    to a function or class.

    Parameters:
    ----------
    param: :obj:`str`, :obj:`tuple` or :obj`list` (optional)
        The parameter or parameters that the error is related to.

        Default: None

    conjunction: :obj:`str` (optional)
        Either "or" or "and", used to humanize several parameters.

        Default: "and"
    """
    attributes = [
        ExceptionAttribute(
            name='param',
            formatter=utils.ensure_iterable,
            format_null_values=True
        ),
        ExceptionAttribute(name='conjunction', default="and"),
    ]

    @property
    def humanized_param(self):
        if len(self.param) == 0:
            return None
        elif len(self.param) == 1:
            return self.param[0]
        return utils.humanize_list(self.param, conjunction=self.conjunction)


class InvalidParamError(ParamError):
    """
    Raised when one or more parameters are provided to a function or class
    but are invalid.

    Parameters:
    ----------
    value: (optional)
        The invalid value that was provided.

        Default: None

    valid_types: :obj:`type` or :obj:`str` or :obj:`list` (optional)
        The type or types, or a description of them, that the value was
        expected to be.

        Default: None
    """
    attributes = [
        ExceptionAttribute(name='value'),
        ExceptionAttribute(
            name='valid_types',
            formatter=utils.ensure_iterable,
            format_null_values=True
        ),
    ]
    content = [
        "Received invalid value for param(s).",
        "Received invalid value {humanized_value}.",
        "Received invalid value for param(s) {humanized_param}.",
        "Received invalid value for param(s) {humanized_param}, "
        "expected {humanized_valid_types}.",
        "Received invalid value {humanized_value} for "
        "param(s) {humanized_param}.",
        "Received invalid value {humanized_value} for "
        "param(s) {humanized_param}, expected {humanized_valid_types}.",
    ]

    @property
    def humanized_value(self):
        if self.value is None:
            return None
        return repr(self.value)

    @property
    def humanized_valid_types(self):
        if len(self.valid_types) == 0:
            return None
        return utils.humanize_list(
            self.valid_types,
            callback=utils.obj_name,
            conjunction="or"
        )


class UnsupportedOperationError(FrozenCollectorsError, TypeError):
    """
    Raised when an operation that would change its contents is attempted on
    an unmodifiable collection.  Extends :obj:`TypeError` so that it can be
    caught the same way as the errors raised by Python's own immutable types.

    Parameters:
    ----------
    operation: :obj:`str` (optional)
        The name of the rejected operation.

        Default: None

    klass: :obj:`str`, :obj:`type` or :obj:`object` (optional)
        The unmodifiable collection, or its class.

        Default: None
    """
    attributes = [
        ExceptionAttribute(name='operation'),
        ExceptionAttribute(name='klass', formatter=utils.obj_name),
    ]
    content = [
        "The collection is unmodifiable.",
        "The operation `{operation}` is not supported, the collection is "
        "unmodifiable.",
        "The operation `{operation}` is not supported by {klass}, it is "
        "unmodifiable.",
    ]
