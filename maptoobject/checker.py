# Copyright (c) 2026 NASK. All rights reserved.

import inspect
from collections.abc import Mapping

from maptoobject.common_helpers import CIMappingView
from maptoobject.exceptions import (
    ConverterFieldDuplicateError,
    ConverterIllegalArgumentError,
    ConverterKeyDuplicateError,
    ConverterMissingFieldsError,
    ConverterMissingValuesError,
    ConverterNullValueError,
)
from maptoobject.type_descriptors import (
    PRIMITIVE_LIKE_TYPES,
    is_enum_type,
    is_plain_class,
)


class Checker(object):

    """
    Checks the preconditions of converting a map to an object.

    Constructor args:
        `converters`:
            The :class:`~maptoobject.converters.Converters` registry
            (consulted by the null-value check).
        `key_case_sensitive`:
            Whether map keys are matched to field names exactly (true)
            or ignoring case (false).
    """

    def __init__(self, converters, key_case_sensitive):
        self._converters = converters
        self._key_case_sensitive = key_case_sensitive

    def check_parameters(self, mapping, target_type):
        if mapping is None:
            raise ConverterIllegalArgumentError('Map cannot be None.')
        if not isinstance(mapping, Mapping):
            raise ConverterIllegalArgumentError('Map must be a mapping.')
        keys = list(mapping)
        if any(key is None for key in keys):
            raise ConverterIllegalArgumentError("Map's keys cannot be None.")
        if not all(isinstance(key, str) for key in keys):
            raise ConverterIllegalArgumentError("Map's keys must be strings.")
        if target_type is None:
            raise ConverterIllegalArgumentError('Target class cannot be None.')
        if not is_plain_class(target_type):
            raise ConverterIllegalArgumentError('Cannot convert map to type annotation.')
        if target_type in PRIMITIVE_LIKE_TYPES:
            raise ConverterIllegalArgumentError('Cannot convert map to primitive type.')
        if is_enum_type(target_type):
            raise ConverterIllegalArgumentError('Cannot convert map to enum.')
        if getattr(target_type, '_is_protocol', False):
            raise ConverterIllegalArgumentError('Cannot convert map to interface.')
        if inspect.isabstract(target_type):
            raise ConverterIllegalArgumentError('Cannot convert map to abstract class.')
        if _derives_from_builtin(target_type):
            raise ConverterIllegalArgumentError(
                'Cannot convert map to built-in type or its subclass.')

    def check_fields_duplicates(self, slots):
        if self._key_case_sensitive:
            return
        field_names = _unique(slot.name for slot in slots)
        duplicates = list(CIMappingView.iter_colliding_keys(field_names))
        if duplicates:
            raise ConverterFieldDuplicateError(duplicates)

    def check_keys_duplicates(self, mapping):
        if self._key_case_sensitive:
            return
        duplicates = list(CIMappingView.iter_colliding_keys(mapping))
        if duplicates:
            raise ConverterKeyDuplicateError(duplicates)

    def check_keys_equal_to_fields_names(self, mapping, slots):
        keys = list(mapping)
        field_names = _unique(slot.name for slot in slots)
        normalized_keys = set(map(self._normalize, keys))
        normalized_field_names = set(map(self._normalize, field_names))
        missing_fields = [
            key for key in keys
            if self._normalize(key) not in normalized_field_names]
        if missing_fields:
            raise ConverterMissingFieldsError(missing_fields)
        missing_values = [
            name for name in field_names
            if self._normalize(name) not in normalized_keys]
        if missing_values:
            raise ConverterMissingValuesError(missing_values)

    def check_for_null_values(self, lookup_view, slots):
        """
        Check that `None` values are given only for the fields that
        accept them, i.e., `Optional` ones and those whose declared
        type has a registered converter (which then decides).
        """
        null_value_field_names = _unique(
            slot.name for slot in slots
            if (not slot.type_descriptor.is_optional_wrapped
                and lookup_view[slot.name] is None
                and not self._converters.has_registered_converter_for(
                    slot.type_descriptor.declared_type)))
        if null_value_field_names:
            raise ConverterNullValueError(null_value_field_names)

    def make_lookup_view(self, mapping):
        """
        Get a mapping in which values can be looked up by field names
        (ignoring case if the checker is not key-case-sensitive).
        """
        if self._key_case_sensitive:
            return mapping
        return CIMappingView(mapping)

    def _normalize(self, name):
        if self._key_case_sensitive:
            return name
        return CIMappingView.normalize_key(name)


def _unique(names):
    return list(dict.fromkeys(names))


def _derives_from_builtin(target_type):
    # e.g., `typing.NamedTuple` classes (tuple), `TypedDict` ones (dict)
    return any(
        klass is not object and klass.__module__ == 'builtins'
        for klass in target_type.__mro__)
