# Copyright (c) 2026 NASK. All rights reserved.

from maptoobject.common_helpers import make_exc_ascii_str
from maptoobject.exceptions import (
    ConverterTypeMismatchError,
    ConverterUnknownError,
    RegisteredConverterError,
)
from maptoobject.log_helpers import get_logger
from maptoobject.type_descriptors import (
    is_assignable,
    type_name,
)


LOGGER = get_logger(__name__)


class ObjectCreator(object):

    """
    Creates instances of target classes and populates their fields.

    The target class's `__init__()` (and any custom `__new__()`) is
    *not* called; fields are set with `object.__setattr__()`, so also
    frozen dataclasses and classes with a custom `__setattr__()` can be
    populated.
    """

    def __init__(self, converters):
        self._converters = converters

    def convert_map_to_object(self, lookup_view, target_type, slots):
        LOGGER.debug('Creating %a instance (%d fields)', type_name(target_type), len(slots))
        instance = self._allocate(target_type)
        for slot in slots:
            value = self._get_converted_value(lookup_view, slot)
            self._assign(instance, slot, value)
        LOGGER.debug('Created %a instance', type_name(target_type))
        return instance

    def _allocate(self, target_type):
        try:
            return object.__new__(target_type)
        except Exception as exc:
            raise ConverterUnknownError(
                "Cannot create an instance of '{}' ({}).",
                type_name(target_type), make_exc_ascii_str(exc)) from exc

    def _get_converted_value(self, lookup_view, slot):
        type_descriptor = slot.type_descriptor
        convert = self._converters.resolve_conversion_function(type_descriptor, slot.name)
        value = convert(lookup_view[slot.name])
        if value is None and not type_descriptor.is_optional_wrapped:
            raise RegisteredConverterError(
                "Null values require fields to be Optional. "
                "Registered converter for type '{}' returned None.",
                type_descriptor.name)
        return value

    def _assign(self, instance, slot, value):
        type_descriptor = slot.type_descriptor
        # (optional-wrapped values have already been checked by the
        # conversion function)
        if not (type_descriptor.is_optional_wrapped
                or is_assignable(value, type_descriptor.declared_type)):
            raise ConverterTypeMismatchError(
                "Cannot assign value of type '{}' to field '{}' of type '{}'.",
                type_name(type(value)), slot.name, type_descriptor.name)
        try:
            object.__setattr__(instance, slot.name, value)
        except Exception as exc:
            raise ConverterUnknownError(
                "Cannot assign value to field '{}' of '{}' ({}).",
                slot.name, type_name(slot.declaring_type), make_exc_ascii_str(exc)) from exc
