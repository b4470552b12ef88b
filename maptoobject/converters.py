# Copyright (c) 2026 NASK. All rights reserved.

"""
The registry of user-supplied conversion functions, and the logic of
choosing the conversion function for a field.
"""

import threading

from maptoobject.common_helpers import make_exc_ascii_str
from maptoobject.exceptions import (
    ConverterEnumCreationError,
    ConverterIllegalArgumentError,
    ConverterTypeMismatchError,
    RegisteredConverterError,
)
from maptoobject.log_helpers import get_logger
from maptoobject.type_descriptors import (
    is_enum_type,
    is_optional_wrapping,
    runtime_class_of,
    type_name,
)


LOGGER = get_logger(__name__)


class Converters(object):

    """
    A registry of conversion functions, keyed by the exact declared
    types (i.e., `list[int]` and `list[str]` are different keys).

    Registration is thread-safe; looking up never blocks, as each
    registration publishes a fresh copy of the internal dict.

    >>> converters = Converters()
    >>> converters.register(int, lambda value: int(value, 16))
    >>> converters.has_registered_converter_for(int)
    True
    >>> converters.has_registered_converter_for(list[int])
    False
    >>> converters
    <Converters registered_types=[<class 'int'>]>
    """

    def __init__(self):
        self._type_to_function = {}
        self._registration_lock = threading.Lock()

    def __repr__(self):
        return '<{} registered_types={!r}>'.format(
            self.__class__.__qualname__,
            self.registered_types)

    @property
    def registered_types(self):
        return list(self._type_to_function)

    def register(self, type_, fn):
        if type_ is None:
            raise ConverterIllegalArgumentError(
                'Cannot register converter for None type.')
        if is_optional_wrapping(type_):
            raise ConverterIllegalArgumentError(
                "Cannot register converter for 'typing.Optional'. "
                "Register converter for the type parameter instead.")
        if fn is None:
            raise ConverterIllegalArgumentError(
                'Registered converter cannot be None.')
        if not callable(fn):
            raise ConverterIllegalArgumentError(
                'Registered converter must be callable.')
        wrapped = _ExceptionWrappingConverter(type_, fn)
        with self._registration_lock:
            new_type_to_function = dict(self._type_to_function)
            new_type_to_function[type_] = wrapped
            self._type_to_function = new_type_to_function
        LOGGER.debug('Registered converter for type %a', type_name(type_))

    def has_registered_converter_for(self, type_):
        return type_ in self._type_to_function

    def resolve_conversion_function(self, type_descriptor, slot_name):
        """
        Get the function to convert map values for the given field.

        Args:
            `type_descriptor`:
                The type descriptor of the field
                (a :class:`~maptoobject.type_descriptors.TypeDescriptor`).
            `slot_name`:
                The name of the field (used in error messages).

        Returns:
            A one-argument callable. For a plain type descriptor it is
            (in this order of precedence): the registered converter
            (if any), an enum-member-by-name lookup function (if the
            type is an enum), or the identity function. For an
            optional-wrapped type descriptor it is a function that
            applies the function resolved for the inner type and
            checks that the result (if not `None`) is *exactly* of
            the inner type.
        """
        if type_descriptor.is_optional_wrapped:
            inner_type = type_descriptor.inner_type
            return _OptionalWrappingConverter(
                inner_function=self.resolve_conversion_function(
                    type_descriptor.inner(),
                    slot_name),
                inner_type=inner_type,
                slot_name=slot_name,
                is_registered=self.has_registered_converter_for(inner_type))
        declared_type = type_descriptor.declared_type
        registered = self._type_to_function.get(declared_type)
        if registered is not None:
            return registered
        if is_enum_type(declared_type):
            return _EnumByNameConverter(declared_type)
        return _identity


class _ExceptionWrappingConverter(object):

    def __init__(self, type_, fn):
        self.type_ = type_
        self.fn = fn

    def __repr__(self):
        return '<{} for {}: {!r}>'.format(
            self.__class__.__qualname__,
            type_name(self.type_),
            self.fn)

    def __call__(self, value):
        try:
            return self.fn(value)
        except Exception as exc:
            raise RegisteredConverterError(
                "Registered converter for type '{}' raised an exception ({}).",
                type_name(self.type_), make_exc_ascii_str(exc)) from exc


class _EnumByNameConverter(object):

    def __init__(self, enum_type):
        self.enum_type = enum_type

    def __repr__(self):
        return '<{} for {}>'.format(
            self.__class__.__qualname__,
            type_name(self.enum_type))

    def __call__(self, value):
        if value is None:
            return None
        if not isinstance(value, str):
            raise ConverterEnumCreationError(
                "Cannot convert value of type '{}' to enum '{}'.",
                type_name(type(value)), type_name(self.enum_type))
        try:
            return self.enum_type.__members__[value]
        except KeyError:
            raise ConverterEnumCreationError(
                "'{}' does not have an enum named '{}'.",
                type_name(self.enum_type), value) from None


class _OptionalWrappingConverter(object):

    def __init__(self, inner_function, inner_type, slot_name, is_registered):
        self.inner_function = inner_function
        self.inner_type = inner_type
        self.slot_name = slot_name
        self.is_registered = is_registered

    def __repr__(self):
        return '<{} for field {!r} of type Optional[{}]: {!r}>'.format(
            self.__class__.__qualname__,
            self.slot_name,
            type_name(self.inner_type),
            self.inner_function)

    def __call__(self, value):
        result = self.inner_function(value)
        if result is None:
            return None
        if type(result) is not runtime_class_of(self.inner_type):
            if self.is_registered:
                raise RegisteredConverterError(
                    "Cannot assign value of type 'Optional[{}]' returned by registered "
                    "converter to field '{}' of type 'Optional[{}]'.",
                    type_name(type(result)), self.slot_name, type_name(self.inner_type))
            raise ConverterTypeMismatchError(
                "Cannot assign value of type 'Optional[{}]' to "
                "field '{}' of type 'Optional[{}]'.",
                type_name(type(result)), self.slot_name, type_name(self.inner_type))
        return result


def _identity(value):
    return value
