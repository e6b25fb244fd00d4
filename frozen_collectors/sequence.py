import collections.abc

from frozen_collectors import exceptions, utils

from .constants import MUTATING_LIST_METHODS


def unsupported(method):
    operation = MUTATING_LIST_METHODS[method]

    def rejected(self, *args, **kwargs):
        raise exceptions.UnsupportedOperationError(
            operation=operation,
            klass=self
        )
    rejected.__name__ = method
    return rejected


class UnmodifiableList(collections.abc.Sequence):
    """
    A read-only view over an ordered container.

    The view wraps the container it is given rather than copying it, and
    exposes only the non-mutating behavior of a :obj:`list`.  Every method of
    :obj:`list` that would change its contents is still present, but always
    raises :obj:`UnsupportedOperationError` without touching the elements.
    The following call raises, and `elements` still reads ["a", "b", "a"]:

    >>> elements = UnmodifiableList(["a", "b", "a"])
    >>> elements.append("c")

    Since the view is a thin wrapper, it can be pickled exactly when the
    wrapped container can be, and unpickles as a view over a container of the
    same type.

    Parameters:
    ----------
    store: :obj:`list` or any ordered container (optional)
        The container the view reads from.  Containers that cannot be indexed
        (generators, sets, etc.) are first materialized into a :obj:`list`.
        Callers that keep a reference to the container and change it will
        see those changes through the view - the collectors in this package
        never let the container escape.

        Default: An empty :obj:`list`.
    """
    __slots__ = ('_store', )

    def __init__(self, store=None):
        if store is None:
            store = []
        elif not isinstance(store, collections.abc.Sequence) \
                and not utils.is_mutable_sequence(store):
            store = list(store)
        object.__setattr__(self, '_store', store)

    def __reduce__(self):
        return (self.__class__, (self._store, ))

    def __repr__(self):
        return f"{self.__class__.__name__}({list(self._store)!r})"

    def __str__(self):
        return str(list(self._store))

    @property
    def data(self):
        return list(self._store)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return self.__class__(list(self._store)[i])
        return self._store[i]

    def __len__(self):
        return len(self._store)

    def __iter__(self):
        return iter(self._store)

    def __contains__(self, value):
        return value in self._store

    def __eq__(self, other):
        if isinstance(other, UnmodifiableList):
            return list(self._store) == list(other._store)
        elif isinstance(other, list):
            return list(self._store) == other
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self._store))

    def __setattr__(self, name, value):
        raise exceptions.UnsupportedOperationError(
            operation='attribute assignment',
            klass=self
        )

    def __delattr__(self, name):
        raise exceptions.UnsupportedOperationError(
            operation='attribute deletion',
            klass=self
        )

    append = unsupported('append')
    extend = unsupported('extend')
    insert = unsupported('insert')
    pop = unsupported('pop')
    remove = unsupported('remove')
    clear = unsupported('clear')
    sort = unsupported('sort')
    reverse = unsupported('reverse')
    __setitem__ = unsupported('__setitem__')
    __delitem__ = unsupported('__delitem__')
    __iadd__ = unsupported('__iadd__')
    __imul__ = unsupported('__imul__')
