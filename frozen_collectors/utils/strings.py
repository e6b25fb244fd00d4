from .builtins import empty, ensure_iterable, get_attribute, is_iterable


def cjoin(*args, delimiter=" ", invalids=empty):
    """
    Joins the provided arguments into a single string, skipping the arguments
    that are considered invalid.

    Parameters:
    ----------
    *args
        The values that should be combined into the single string.

    delimiter: :obj:`str` (optional)
        The separator placed between the values that are included.

        Default: " "

    invalids: :obj:`list` or :obj:`tuple` or any value (optional)
        The value or values that are excluded from the joined string.

        Default: [None]
    """
    invalids = ensure_iterable(empty.default(invalids, [None]))
    return delimiter.join([str(a) for a in args if a not in invalids])


def get_string_formatted_kwargs(value):
    """
    Returns the names of the format arguments in the provided string, in the
    order they first appear.

    >>> get_string_formatted_kwargs("Cannot {operation} a {klass}.")
    >>> ["operation", "klass"]
    """
    formatted_kwargs = []
    current = None
    for char in value:
        if char == "{":
            current = ""
        elif char == "}":
            if current is not None:
                if current not in formatted_kwargs:
                    formatted_kwargs.append(current)
                current = None
        elif current is not None:
            current = current + char
    return formatted_kwargs


def conditionally_format_string(string, obj, optimized=True,
        is_null=lambda v: v is None):
    """
    Formats a string, or chooses and formats the best of several candidate
    strings, using the non-null attributes of an object or the keys of a
    :obj:`dict`.

    Unlike :obj:`str.format`, missing format arguments do not raise - they
    are simply left in place.  When several candidates are provided and
    `optimized` is True, the candidate with the fewest missing arguments is
    chosen, and from those the one with the most arguments overall:

    >>> conditionally_format_string([
    >>>     "Cannot {operation} an instance of {klass}.",
    >>>     "Cannot {operation} an unmodifiable list.",
    >>>     "The list is unmodifiable."
    >>> ], {"operation": "append"})
    >>> "Cannot append an unmodifiable list."

    Parameters:
    ----------
    string: :obj:`str` or :obj:`list` or :obj:`tuple`
        The single string or candidate strings to format.

    obj: :obj:`dict` or :obj:`object` or :obj:`type`
        The source of the values injected into the format arguments.

    optimized: :obj:`bool` (optional)
        Whether or not a single best candidate should be chosen.  If False,
        every candidate is formatted and the formatted array is returned.

        Default: True

    is_null: :obj:`lambda` (optional)
        Determines whether or not a value should be treated as missing.

        Default: lambda v: v is None
    """
    def count_params_present(params):
        return len([
            v for v in [get_attribute(obj, p, strict=False) for p in params]
            if not is_null(v)
        ])

    def get_best_string_choice(choices):
        counts = []
        for choice in choices:
            format_args = get_string_formatted_kwargs(choice)
            present = count_params_present(format_args)
            counts.append((choice, len(format_args), len(format_args) - present))
        minimum_missing = min(c[2] for c in counts)
        with_min_missing = [c for c in counts if c[2] == minimum_missing]
        maximum_args = max(c[1] for c in with_min_missing)
        return [c[0] for c in with_min_missing if c[1] == maximum_args][0]

    def conditionally_format(s):
        for name in get_string_formatted_kwargs(s):
            value = get_attribute(obj, name, strict=False)
            if not is_null(value):
                s = s.replace("{%s}" % name, str(value))
        return s.strip()

    if string is None or (is_iterable(string) and len(string) == 0):
        return None
    strings = ensure_iterable(string)
    if any([not isinstance(s, str) for s in strings]):
        raise TypeError("Expected all candidate values to be of type str.")
    elif optimized:
        return conditionally_format(get_best_string_choice(strings))
    elif is_iterable(string):
        return [conditionally_format(s) for s in strings]
    return conditionally_format(string)
