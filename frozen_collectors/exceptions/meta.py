from frozen_collectors import utils


class ExceptionMetaClass(type):
    """
    Meta class for :obj:`AbstractException` that merges the `attributes`
    defined on the class with those defined on its bases and attaches an
    @property for each attribute.

    The value of each @property is resolved in the following order:

    (1) The value provided on initialization of the instance.
    (2) The value defined statically on the class (or a base), either as a
        simple attribute or as an @property.
    (3) The `default` of the :obj:`ExceptionAttribute`.
    (4) A `default_<attribute>` value defined statically on the class.

    The resolved value is then formatted by the :obj:`ExceptionAttribute`.
    """
    def __new__(cls, name, bases, dct):
        dct['attributes'] = utils.merge_by_attribute(
            *[getattr(b, 'attributes', []) for b in bases],
            dct.get('attributes', []),
            attr='name'
        )
        # The raw static values have to be tracked separately, because once
        # the class is built the names refer to the generated properties.
        statics = {}
        for b in reversed(bases):
            statics.update(getattr(b, '_static_attributes', {}))
        for attr in dct['attributes']:
            if attr.name in dct:
                statics[attr.name] = dct[attr.name]
        dct['_static_attributes'] = statics

        klass = super().__new__(cls, name, bases, dct)
        for attr in dct['attributes']:
            setattr(klass, attr.name, property(
                cls.establish_property(attr, statics.get(attr.name, None))))
        return klass

    @staticmethod
    def establish_property(attr, original):
        def attribute_property(instance):
            value = getattr(instance, f'_{attr.name}', None)
            if value is None and original is not None:
                value = original
                if isinstance(original, property):
                    value = original.fget(instance)
            if value is None:
                value = attr.default
            if value is None:
                value = getattr(instance, f'default_{attr.name}', None)
            return attr.format(value, instance)
        return attribute_property
