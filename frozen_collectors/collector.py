from frozen_collectors import exceptions, utils


class Collector:
    """
    A reusable recipe that folds the elements of an iterable into a single
    result.

    The recipe is made up of (4) functions:

    (1) The supplier, which creates a new, empty mutable container.
    (2) The accumulator, which folds a single element into the container.
    (3) The combiner, which merges two partially accumulated containers -
        the first before the second, in encounter order - and returns the
        merged container.
    (4) The finisher, which transforms the container into the final result.

    A :obj:`Collector` holds no state of its own, so the same instance can be
    used for any number of collections:

    >>> collector = Collector(
    >>>     supplier=list,
    >>>     accumulator=list.append,
    >>>     finisher=tuple
    >>> )
    >>> collector.collect(["a", "b", "a"])
    >>> ("a", "b", "a")

    Parameters:
    ----------
    supplier: :obj:`lambda` or :obj:`type`
        Takes no arguments and returns a new mutable container.

    accumulator: :obj:`lambda`
        Takes the container and an element and adds the element to the
        container.  The return value is ignored.

    combiner: :obj:`lambda` (optional)
        Takes two containers and returns the merged container.  Only required
        for :obj:`Collector.collect_partitioned`.

        Default: None

    finisher: :obj:`lambda` or :obj:`type` (optional)
        Takes the container and returns the final result.  If not provided,
        the container itself is the result.

        Default: None
    """
    def __init__(self, supplier, accumulator, combiner=None, finisher=None):
        self.validate_function(supplier, 'supplier')
        self.validate_function(accumulator, 'accumulator')
        if combiner is not None:
            self.validate_function(combiner, 'combiner')
        if finisher is not None:
            self.validate_function(finisher, 'finisher')
        self._supplier = supplier
        self._accumulator = accumulator
        self._combiner = combiner
        self._finisher = finisher

    def __repr__(self):
        return (
            f"<{self.__class__.__name__} "
            f"supplier={utils.obj_name(self._supplier)} "
            f"identity_finish={self.identity_finish}>"
        )

    def __call__(self, iterable):
        return self.collect(iterable)

    @classmethod
    def validate_function(cls, func, param):
        if not utils.is_callable(func):
            raise exceptions.InvalidParamError(
                klass=cls,
                param=param,
                value=func,
                valid_types='callable'
            )

    @property
    def supplier(self):
        return self._supplier

    @property
    def accumulator(self):
        return self._accumulator

    @property
    def combiner(self):
        return self._combiner

    @property
    def finisher(self):
        return self._finisher

    @property
    def identity_finish(self):
        return self._finisher is None

    def supply(self):
        return self._supplier()

    def accumulate(self, container, iterable):
        for element in iterable:
            self._accumulator(container, element)
        return container

    def finish(self, container):
        if self.identity_finish:
            return container
        return self._finisher(container)

    def collect(self, iterable):
        """
        Folds the elements of the provided iterable, in encounter order, into
        a container created by the supplier and returns the finished result.

        Exceptions raised while iterating or by any of the functions of the
        collector are not caught.
        """
        return self.finish(self.accumulate(self.supply(), iterable))

    def collect_partitioned(self, partitions):
        """
        Accumulates each iterable in `partitions` into its own container, then
        merges the containers in order with the combiner and finishes the
        merged result once.

        The result is the same as collecting the concatenation of the
        partitions.  If no partitions are provided, the result is that of
        collecting an empty iterable.
        """
        if self._combiner is None:
            raise exceptions.ImproperUsageError(
                klass=self,
                func='collect_partitioned',
                message=(
                    "The collector does not define a combiner, so partially "
                    "accumulated containers cannot be merged."
                )
            )
        merged = None
        for partition in partitions:
            container = self.accumulate(self.supply(), partition)
            if merged is None:
                merged = container
            else:
                merged = self._combiner(merged, container)
        if merged is None:
            merged = self.supply()
        return self.finish(merged)

    def and_then(self, finisher):
        """
        Returns a new :obj:`Collector` that applies the provided finisher to
        the result of this collector.
        """
        self.validate_function(finisher, 'finisher')
        if self.identity_finish:
            composed = finisher
        else:
            original = self._finisher

            def composed(container):
                return finisher(original(container))
        return self.__class__(
            supplier=self._supplier,
            accumulator=self._accumulator,
            combiner=self._combiner,
            finisher=composed
        )


def collect(iterable, collector):
    """
    Collects the elements of the provided iterable with the provided
    :obj:`Collector`.
    """
    if not isinstance(collector, Collector):
        raise exceptions.InvalidParamError(
            func='collect',
            param='collector',
            value=collector,
            valid_types=(Collector, )
        )
    return collector.collect(iterable)
