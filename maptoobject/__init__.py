# Copyright (c) 2026 NASK. All rights reserved.

"""
*maptoobject*: converting maps (such as rows fetched from a database,
or parsed JSON objects) to instances of classes with annotated fields.
"""

from maptoobject.converter import MapToObjectConverter
from maptoobject.exceptions import (
    ConverterError,
    ConverterIllegalArgumentError,
    ConverterKeyDuplicateError,
    ConverterFieldDuplicateError,
    ConverterMissingFieldsError,
    ConverterMissingValuesError,
    ConverterNullValueError,
    ConverterEnumCreationError,
    ConverterTypeMismatchError,
    RegisteredConverterError,
    ConverterUnknownError,
)


__all__ = [
    'MapToObjectConverter',
    'ConverterError',
    'ConverterIllegalArgumentError',
    'ConverterKeyDuplicateError',
    'ConverterFieldDuplicateError',
    'ConverterMissingFieldsError',
    'ConverterMissingValuesError',
    'ConverterNullValueError',
    'ConverterEnumCreationError',
    'ConverterTypeMismatchError',
    'RegisteredConverterError',
    'ConverterUnknownError',
]
