import functools

from frozen_collectors import utils

from .meta import ExceptionMetaClass
from .models import ExceptionAttribute, Formatter, StringFormatChoices


def string_choices_formatter(**kwargs):
    return Formatter(lambda instance: [
        utils.ensure_iterable,
        StringFormatChoices.flattener(instance),
        functools.partial(
            utils.conditionally_format_string,
            obj=instance,
            **kwargs
        )
    ])


class AbstractException(Exception, metaclass=ExceptionMetaClass):
    """
    Abstract base class for all :obj:`Exception` classes used in this project.
    It should never be raised directly, only through a class that extends it.

    Each attribute of the exception can be established statically on the
    class as a simple attribute, statically on the class as an @property or
    dynamically on initialization.  Attributes that are not provided can fall
    back to a `default_<attribute>` value defined statically on the class.

    >>> class CollectionError(AbstractException):
    >>>     content = "The elements could not be collected."
    >>>
    >>> str(CollectionError(prefix="Collection failed"))
    >>> "Collection failed: The elements could not be collected."

    Parameters:
    ----------
    message: :obj:`str` or :obj:`tuple` or :obj:`list` (optional)
        The core message of the exception, exposed as `content`.  Either a
        single string or an array of candidate strings, each of which can
        contain format arguments that refer to properties of the exception.
        When an array is provided, the candidate whose format arguments are
        best satisfied by the non-null properties of the instance is used.

        Default: None

    prefix: :obj:`str` or :obj:`tuple` or :obj:`list` (optional)
        A string, or array of candidate strings, displayed in front of the
        content.

        Default: None

    detail: :obj:`str` or :obj:`tuple` or :obj:`list` (optional)
        One or more lines of additional detail displayed after the content,
        each on its own line.

        Default: None
    """
    attributes = [
        ExceptionAttribute(
            name='detail',
            formatter=utils.ensure_iterable,
            format_null_values=True
        ),
        ExceptionAttribute(
            name='content',
            accessor='message',
            formatter=string_choices_formatter()
        ),
        ExceptionAttribute(
            name='prefix',
            formatter=string_choices_formatter()
        ),
    ]
    default_detail_indent = "--> "

    def __init__(self, **kwargs):
        for attr in self.attributes:
            setattr(self, f'_{attr.name}', kwargs.pop(attr.accessor, None))
        if kwargs:
            humanized = utils.humanize_list(kwargs.keys())
            raise TypeError(
                f"The exception class {self.__class__} received unexpected "
                f"parameters {humanized}."
            )
        super().__init__()

    @classmethod
    def format_prefix_value(cls, value, msg):
        end_char = '.' if msg is None else ':'
        if value is not None and not value.endswith(end_char):
            if value[-1] in ('.', ':'):
                value = value[:-1]
            return f"{value}{end_char}"
        return value

    @property
    def message(self):
        lines = [utils.cjoin(
            self.format_prefix_value(self.prefix, self.content),
            self.content
        )]
        lines += [
            utils.cjoin(
                self.default_detail_indent,
                utils.conditionally_format_string(d, self),
                delimiter=""
            )
            for d in self.detail
        ]
        return "\n".join(lines)

    def __str__(self):
        return self.message
