from frozen_collectors import utils


__all__ = ('ExceptionAttribute', 'Formatter', 'StringFormatChoices')


class Formatter:
    """
    Wraps a formatting function that needs the exception instance as context.

    The wrapped function takes the instance and returns a formatting function,
    or an array of formatting functions, that are applied to the value in
    order:

    >>> Formatter(lambda instance: [
    >>>     utils.ensure_iterable,
    >>>     functools.partial(utils.conditionally_format_string, obj=instance)
    >>> ])
    """
    def __init__(self, func):
        self._func = func

    def __call__(self, value, instance):
        for func in utils.ensure_iterable(self._func(instance)):
            value = func(value)
        return value


class ExceptionAttribute:
    """
    An attribute of an :obj:`AbstractException` class that can be provided on
    initialization or defined statically on the class, along with how it is
    defaulted and formatted.

    Parameters:
    ----------
    name: :obj:`str`
        The name of the @property the attribute is exposed as.

    accessor: :obj:`str` (optional)
        The keyword argument the value is read from on initialization, when it
        differs from `name`.

        Default: None

    formatter: :obj:`lambda` or :obj:`Formatter` or :obj:`list` (optional)
        One or more formatters applied to the value when it is accessed.

        Default: None

    format_null_values: :obj:`bool` (optional)
        Whether or not the formatters should be applied to a null value.

        Default: False

    default: (optional)
        The value used when no other source provides one.

        Default: None
    """
    def __init__(self, name, accessor=None, formatter=None,
            format_null_values=False, default=None):
        self._name = name
        self._accessor = accessor
        self._formatter = formatter
        self._format_null_values = format_null_values
        self._default = default

    @property
    def name(self):
        return self._name

    @property
    def accessor(self):
        return self._accessor or self._name

    @property
    def default(self):
        return self._default

    @property
    def formatter(self):
        return utils.ensure_iterable(self._formatter)

    def format(self, value, instance):
        if value is not None or self._format_null_values:
            for fmt in self.formatter:
                if isinstance(fmt, Formatter):
                    value = fmt(value, instance)
                else:
                    value = fmt(value)
        return value


class StringFormatChoices:
    """
    Associates a set of candidate format strings with a conditional, such that
    the candidates are only considered when the conditional evaluates to True
    for the exception instance.

    >>> content = [
    >>>     StringFormatChoices(
    >>>         func=lambda instance: len(instance.value) == 1,
    >>>         isolated=True,
    >>>         choices=["Received invalid value {humanized_value}."]
    >>>     ),
    >>>     "Received invalid values."
    >>> ]

    When `isolated` is True and the conditional passes, the associated
    candidates replace every other candidate in the array.
    """
    def __init__(self, func, choices, isolated=False):
        self._func = func
        self._choices = choices
        self._isolated = isolated

    def __call__(self, instance):
        return self._func(instance) is True

    @property
    def choices(self):
        return utils.ensure_iterable(self._choices)

    @property
    def isolated(self):
        return self._isolated

    @classmethod
    def flattener(cls, instance):
        def fn(value):
            return cls.flatten(instance, value)
        return fn

    @classmethod
    def flatten(cls, instance, value):
        """
        Flattens an array of candidates that may include instances of
        :obj:`StringFormatChoices` to the array of :obj:`str` candidates that
        apply to the provided instance.
        """
        flattened = []
        for choice_value in value:
            if isinstance(choice_value, cls):
                if choice_value(instance) is True:
                    if choice_value.isolated:
                        return choice_value.choices
                    flattened += choice_value.choices
            else:
                flattened += [choice_value]
        return flattened
