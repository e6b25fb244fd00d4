import copy
import click

from frozen_collectors.utils import cjoin


class Terminal:
    BOLD = '\033[1m'
    END = '\033[0m'
    BLUE = '\033[34m'
    GREEN = '\033[92m'
    YELLOW = '\033[33m'
    RED = '\033[31m'

    LEVEL_COLOR_MAP = {
        'warning': YELLOW,
        'error': RED,
        'success': GREEN,
        'info': BLUE
    }

    @classmethod
    def reset(cls, text, reset=True):
        if reset:
            return text + cls.END
        return text

    @classmethod
    def get_color(cls, color=None, level=None):
        if color is not None:
            if not hasattr(cls, color.upper()):
                raise LookupError(f"Invalid color {color} provided.")
            return getattr(cls, color.upper())
        elif level is not None:
            if level.lower() not in cls.LEVEL_COLOR_MAP:
                raise LookupError(f"Invalid level provided: {level}.")
            return cls.LEVEL_COLOR_MAP[level.lower()]
        return None

    @classmethod
    def color(cls, text, color=None, level=None, reset=False):
        color = cls.get_color(color=color, level=level)
        if color is not None:
            # Reset is only applicable if the color was applied.
            return cls.reset(color + text, reset=reset)
        return text

    @classmethod
    def bold(cls, text, color=None, level=None, reset=False):
        text = cls.color(text, color=color, level=level, reset=True)
        return cls.reset(cls.BOLD + text, reset=reset)

    @classmethod
    def get_prefix(cls, prefix=None, color=None, level=None):
        if prefix is not None:
            if not prefix.endswith(":"):
                prefix = f"{prefix}:"
            return cls.bold(prefix, color=color, level=level, reset=True)
        return None

    @classmethod
    def message(cls, text, prefix=None, color=None, level=None):
        text = cls.color(text, color=color, level=level, reset=True)
        return cjoin(cls.get_prefix(prefix=prefix, color=color, level=level),
            text)


class MessageFn:
    """
    A callable that formats a message for the terminal and, unless told not
    to, writes it to stderr.

    Calling the instance with a message outputs the message.  Calling it with
    only keyword arguments returns a new :obj:`MessageFn` configured with
    those arguments layered over the original configuration:

    >>> deprecated = stdout.warning(prefix="Deprecated")
    >>> deprecated("The `strict` parameter will default to True.")
    """
    def __init__(self, **kwargs):
        self._kwargs = kwargs

    def __call__(self, *args, **kwargs):
        display = kwargs.pop('display', True)

        base_kwargs = copy.deepcopy(self._kwargs)
        base_kwargs.update(**kwargs)
        if args:
            if len(args) != 1 or not isinstance(args[0], str):
                raise TypeError(f"Improper call of {self.__class__}.")
            data = Terminal.message(args[0], **base_kwargs)
            if display is True:
                click.echo(data, err=True)
            return data
        return self.__class__(**base_kwargs)

    def format(self, message, **kwargs):
        if 'display' in kwargs:
            raise TypeError(
                "The `display` parameter is redundant for this method.")
        return self(message, display=False, **kwargs)


class stdout:
    info = MessageFn(level="info")
    warning = MessageFn(level="warning", prefix="Warning")
