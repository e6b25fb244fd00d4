CONJUNCTIONS = ['or', 'and']


def humanize_list(value, callback=str, conjunction='and', oxford_comma=True):
    """
    Returns a human readable string for the provided iterable.
    """
    if conjunction.lower() not in CONJUNCTIONS:
        raise TypeError(
            "Expected values `or` or `and` for conjunction, but received "
            f"{conjunction}."
        )
    elif value is None:
        return value

    value = list(value)
    num = len(value)
    if num == 0:
        return ""
    elif num == 1:
        return callback(value[0])
    s = ", ".join(map(callback, value[:num - 1]))
    if num >= 3 and oxford_comma is True:
        s += ","
    return "%s %s %s" % (s, conjunction.lower(), callback(value[num - 1]))
