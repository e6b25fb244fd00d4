DEFAULT_LIST_FACTORY = list

# The methods of `list` that change its contents in place, mapped to the
# name of the operation used when the operation is rejected.
MUTATING_LIST_METHODS = {
    'append': 'append',
    'extend': 'extend',
    'insert': 'insert',
    'pop': 'pop',
    'remove': 'remove',
    'clear': 'clear',
    'sort': 'sort',
    'reverse': 'reverse',
    '__setitem__': 'item assignment',
    '__delitem__': 'item deletion',
    '__iadd__': 'in-place concatenation',
    '__imul__': 'in-place repetition',
}
