class empty:
    """
    Represents no value being provided for a parameter, so that a parameter
    that was omitted can be told apart from any value that was passed
    explicitly - `None` included.
    """
    @classmethod
    def default(cls, value, default):
        if value is empty:
            return default
        return value


def obj_name(obj):
    if isinstance(obj, str):
        return obj
    elif hasattr(obj, '__name__'):
        return obj.__name__
    elif hasattr(obj, '__class__'):
        return obj.__class__.__name__
    else:
        raise TypeError(
            f"Expected the `obj` parameter to be of type {str}, {object} or "
            f"{type}, not {type(obj)}"
        )


def is_callable(func):
    return hasattr(func, '__call__')


def is_iterable(value):
    return not isinstance(value, str) and hasattr(value, '__iter__')


def is_mutable_sequence(value):
    """
    Returns whether or not the provided value behaves like a mutable ordered
    container - it can be appended to, measured and indexed.
    """
    return all([
        hasattr(value, attr)
        for attr in ('append', '__len__', '__getitem__')
    ])


def ensure_iterable(value, strict=False, cast=list, cast_none=True):
    """
    Ensures that the provided value is an iterable that can be indexed
    numerically.
    """
    if value is None:
        if cast_none:
            return cast()
        return None
    # A str instance has an `__iter__` method.
    if isinstance(value, str):
        return [value]
    elif hasattr(value, '__iter__') and not isinstance(value, type):
        # A set() has `__iter__` but cannot be indexed, so always cast.
        return cast(value)
    elif strict:
        raise ValueError("Value %s is not an iterable." % value)
    return cast([value])


def get_attribute(obj, attr, strict=True, default=None):
    """
    Reads the provided attribute from the object which can be a :obj:`dict`
    instance, a class or a class instance.

    Parameters:
    ----------
    obj: :obj:`type` or :obj:`object` or :obj:`dict`
        The object for which the attribute is read from.

    attr: :obj:`str`
        The string name of the attribute on or in the provided `obj`.

    strict: :obj:`bool` (optional)
        Whether or not an exception should be raised if the provided `attr`
        does not exist on or in the provided `obj`.

        Default: True

    default (optional)
        The value returned when `strict` is `False` and the attribute does
        not exist.

        Default: None
    """
    if isinstance(obj, dict):
        if attr not in obj and strict:
            raise KeyError(
                f"The attribute {attr} does not exist in the provided "
                "dictionary."
            )
        return obj.get(attr, default)
    elif not hasattr(obj, attr) and strict:
        raise AttributeError(
            f"The attribute {attr} does not exist on the provided "
            f"{obj_name(obj)}."
        )
    return getattr(obj, attr, default)


def merge_by_attribute(*arrays, attr='name'):
    """
    Merges the provided arrays into a single array, keeping the position of
    the first occurrence of each unique value of `attr` but the element
    defined latest for that value.

    >>> merge_by_attribute([a1, b1], [a2, c1], attr='name')
    >>> [a2, b1, c1]
    """
    merged = []
    positions = {}
    for array in arrays:
        for element in array:
            key = get_attribute(element, attr)
            if key in positions:
                merged[positions[key]] = element
            else:
                positions[key] = len(merged)
                merged.append(element)
    return merged
