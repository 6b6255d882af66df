from functools import reduce


def nested_getattr(instance: object, attributes: str, separator='.', default=None, call=True):
    """
    Returns nested getattr and returns default if not found
    :param instance: object to get nested attributes from
    :param attributes: separator separated attributes
    :param separator: separator between nested attributes.
    :param default: default value to return if attribute was not found
    :param call: flag that determines whether to call or not if callable
    :return:
    """
    nested_attrs = attributes.split(separator)
    nested_attrs.insert(0, instance)
    try:
        attr = reduce(
            lambda instance_, attribute_: getattr(instance_, attribute_),
            nested_attrs
        )
        if call and callable(attr):
            return attr()
        return attr
    except AttributeError:
        return default
