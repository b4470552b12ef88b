# Copyright (c) 2026 NASK. All rights reserved.

from collections.abc import Mapping
from typing import Optional

from maptoobject.checker import Checker
from maptoobject.common_helpers import make_exc_ascii_str
from maptoobject.config import ConverterConfig
from maptoobject.converters import Converters
from maptoobject.exceptions import (
    ConverterError,
    ConverterUnknownError,
)
from maptoobject.log_helpers import get_logger
from maptoobject.object_creator import ObjectCreator
from maptoobject.schema import slots_of
from maptoobject.typing_helpers import (
    ConversionFunction,
    SourceMapping,
    T,
    TypeSpec,
)


LOGGER = get_logger(__name__)


class MapToObjectConverter(object):

    """
    Converts maps (dicts or other mappings with `str` keys) to objects
    of classes with annotated fields.

    Constructor kwargs:
        `key_case_sensitive` (default: True):
            Whether map keys must be exactly equal to field names
            (when true) or equal ignoring case (when false).

    Each map key must correspond to exactly one field name of the
    target class (including the fields declared by its base classes),
    and vice versa. The target class's `__init__()` is *not* called.

    A value is assigned to a field:

    * after being converted by the converter registered for the
      declared type of the field (see: :meth:`register_converter`),
      if any;
    * or after being converted to an enum member (looked up by name),
      if the field type is an enum;
    * or as is -- provided that its type matches the declared type of
      the field (for types such as `int`, `float`, `str` or `bytes`,
      the type must match *exactly*, e.g., `True` cannot be assigned
      to an `int` field).

    `None` values are allowed only for `Optional[...]` fields (unless
    a registered converter turns `None` into something else).

    >>> import enum
    >>> from typing import Optional
    >>> class Gender(enum.Enum):
    ...     MALE = 1
    ...     FEMALE = 2
    ...
    >>> class Employee:
    ...     name: str
    ...     age: int
    ...     gender: Gender
    ...     phone_number: Optional[str]
    ...
    >>> converter = MapToObjectConverter()
    >>> employee = converter.convert({
    ...     'name': 'Jaroslaw',
    ...     'age': 26,
    ...     'gender': 'MALE',
    ...     'phone_number': None,
    ... }, Employee)
    >>> employee.name, employee.age, employee.gender, employee.phone_number
    ('Jaroslaw', 26, <Gender.MALE: 1>, None)

    >>> converter.convert({'name': 'Jaroslaw'}, Employee)
    Traceback (most recent call last):
      ...
    maptoobject.exceptions.ConverterMissingValuesError: No values for fields: 'age', 'gender', 'phone_number'.
    """

    def __init__(self, key_case_sensitive: bool = True):
        self._key_case_sensitive = bool(key_case_sensitive)
        self._converters = Converters()
        self._checker = Checker(self._converters, self._key_case_sensitive)
        self._object_creator = ObjectCreator(self._converters)

    @classmethod
    def from_config(cls,
                    settings: Optional[Mapping] = None,
                    config_path: Optional[str] = None) -> 'MapToObjectConverter':
        """
        Create a converter configured with the given Pyramid-like
        `settings` mapping or, if that is not given, with the config
        file whose path is `config_path` (or with the default
        configuration if neither is given).
        """
        if settings is not None:
            config = ConverterConfig.from_settings(settings)
        elif config_path is not None:
            config = ConverterConfig.from_file(config_path)
        else:
            config = ConverterConfig()
        return cls(key_case_sensitive=config.key_case_sensitive)

    @property
    def key_case_sensitive(self) -> bool:
        return self._key_case_sensitive

    def register_converter(self,
                           type_: TypeSpec,
                           fn: ConversionFunction) -> 'MapToObjectConverter':
        """
        Register a function converting map values for fields whose
        declared type is *exactly* `type_`.

        The function takes one argument (the map value, possibly `None`)
        and should return an instance of `type_`. It is also used for
        `Optional[type_]` fields. Registering another function for the
        same type replaces the previous one.

        Returns the converter itself, so that calls can be chained.

        >>> class Name:
        ...     value: str
        ...
        >>> class Person:
        ...     first_name: Name
        ...
        >>> def str_to_name(s):
        ...     name = Name()
        ...     name.value = s.title()
        ...     return name
        ...
        >>> converter = MapToObjectConverter().register_converter(Name, str_to_name)
        >>> converter.convert({'first_name': 'ADA'}, Person).first_name.value
        'Ada'
        """
        self._converters.register(type_, fn)
        return self

    def convert(self, mapping: SourceMapping, target_type: type[T]) -> T:
        """
        Create an instance of `target_type`, populated with the values
        from `mapping`.

        Raises:
            :exc:`~maptoobject.exceptions.ConverterError` (or a subclass of it).
        """
        try:
            return self._convert(mapping, target_type)
        except ConverterError:
            raise
        except Exception as exc:
            LOGGER.warning('Unexpected exception while converting a map (%s)',
                           make_exc_ascii_str(exc))
            raise ConverterUnknownError() from exc

    def _convert(self, mapping, target_type):
        checker = self._checker
        checker.check_parameters(mapping, target_type)
        slots = slots_of(target_type)
        checker.check_fields_duplicates(slots)
        checker.check_keys_duplicates(mapping)
        checker.check_keys_equal_to_fields_names(mapping, slots)
        lookup_view = checker.make_lookup_view(mapping)
        checker.check_for_null_values(lookup_view, slots)
        return self._object_creator.convert_map_to_object(lookup_view, target_type, slots)
