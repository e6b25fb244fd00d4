from frozen_collectors import exceptions, utils
from frozen_collectors.stdout import stdout

from .collector import Collector
from .constants import DEFAULT_LIST_FACTORY
from .sequence import UnmodifiableList


__all__ = (
    'to_collection',
    'to_list',
    'collecting_and_then',
    'to_unmodifiable_list',
)


def append_element(container, element):
    container.append(element)


def extend_container(left, right):
    for element in right:
        left.append(element)
    return left


def container_supplier(factory, param='factory', func=None, strict=False):
    """
    Returns a supplier that creates a container with the provided factory and
    ensures that the container can be accumulated into.

    Parameters:
    ----------
    factory: :obj:`lambda` or :obj:`type`
        Takes no arguments and returns a new, empty mutable ordered container.
        Exceptions raised by the factory are not caught.

    param: :obj:`str` (optional)
        The name the factory was provided as, used in error messages.

        Default: "factory"

    func: :obj:`str` (optional)
        The name of the public function the factory was provided to, used in
        error messages.

        Default: None

    strict: :obj:`bool` (optional)
        Whether or not a container that already contains elements should be
        rejected.  If False, the existing elements are kept ahead of the
        accumulated elements and a warning is issued.

        Default: False
    """
    if not utils.is_callable(factory):
        raise exceptions.InvalidParamError(
            func=func,
            param=param,
            value=factory,
            valid_types='callable'
        )

    def supplier():
        container = factory()
        if not utils.is_mutable_sequence(container):
            raise exceptions.InvalidParamError(
                func=func,
                param=param,
                value=container,
                message=(
                    "The container returned by `{humanized_param}` must be a "
                    "mutable ordered container, received {humanized_value}."
                )
            )
        elif len(container) != 0:
            if strict:
                raise exceptions.InvalidParamError(
                    func=func,
                    param=param,
                    value=container,
                    message=(
                        "The container returned by `{humanized_param}` must "
                        "be empty, received {humanized_value}."
                    )
                )
            stdout.warning(
                f"The container returned by `{param}` is not empty.  Its "
                f"{len(container)} existing element(s) will precede the "
                "collected elements."
            )
        return container
    return supplier


def collection_collector(supplier):
    return Collector(
        supplier=supplier,
        accumulator=append_element,
        combiner=extend_container
    )


def to_collection(factory, strict=False):
    """
    Returns a :obj:`Collector` that appends the input elements, in encounter
    order, to a new container created by the provided factory.

    Parameters:
    ----------
    factory: :obj:`lambda` or :obj:`type`
        Takes no arguments and returns a new, empty mutable ordered container.

    strict: :obj:`bool` (optional)
        Whether or not a non-empty container returned by the factory should
        raise instead of issuing a warning.

        Default: False
    """
    return collection_collector(container_supplier(
        factory,
        func='to_collection',
        strict=strict
    ))


def to_list():
    """
    Returns a :obj:`Collector` that accumulates the input elements into a new
    :obj:`list`, in encounter order.
    """
    return to_collection(DEFAULT_LIST_FACTORY)


def collecting_and_then(collector, finisher):
    """
    Adapts the provided :obj:`Collector` to apply an additional finishing
    transformation to its result.
    """
    if not isinstance(collector, Collector):
        raise exceptions.InvalidParamError(
            func='collecting_and_then',
            param='collector',
            value=collector,
            valid_types=(Collector, )
        )
    return collector.and_then(finisher)


def to_unmodifiable_list(list_factory=utils.empty, strict=False):
    """
    Returns a :obj:`Collector` that accumulates the input elements into a new
    :obj:`UnmodifiableList`, in encounter order.

    Without a `list_factory`, the elements are accumulated into a
    :obj:`list` and there are no guarantees on the type of the container
    behind the returned view.  If more control over that container is
    required - for instance so that the result can be pickled, or so that a
    particular :obj:`list` subclass backs it - provide a `list_factory`.

    >>> collect(["a", "b", "a"], to_unmodifiable_list())
    >>> UnmodifiableList(['a', 'b', 'a'])

    Parameters:
    ----------
    list_factory: :obj:`lambda` or :obj:`type` (optional)
        Takes no arguments and returns a new, empty mutable ordered container
        which the returned view wraps directly.  The view can be pickled if
        and only if the container can be.

        A factory that returns a container which already contains elements is
        the caller's responsibility: by default the existing elements are
        kept ahead of the collected elements and a warning is issued.

        Default: :obj:`list`

    strict: :obj:`bool` (optional)
        Whether or not a non-empty container returned by `list_factory`
        should raise an :obj:`InvalidParamError` instead of issuing a warning.

        Default: False
    """
    if list_factory is utils.empty:
        return collecting_and_then(to_list(), UnmodifiableList)
    collector = collection_collector(container_supplier(
        list_factory,
        param='list_factory',
        func='to_unmodifiable_list',
        strict=strict
    ))
    return collecting_and_then(collector, UnmodifiableList)
