def first_value(values):
    if isinstance(values, str):
        return values
    if not values:
        return ''
    value = values[0]
    return '' if value is None else value


def map_attributes(attribute_map, attributes):
    """
    Map the attributes received from the IdP onto local profile fields.

    :param attribute_map: local field name -> external attribute name
    :param attributes: external attribute name -> list of values
    :return: local field name -> first value of the external attribute, '' if it was not received
    """
    attributes = attributes or {}
    return {field: first_value(attributes.get(name)) for field, name in attribute_map.items()}


def first_string(value):
    """ Cleans and returns the first of potentially many ';'-separated values """
    return value.split(';')[0].strip()
