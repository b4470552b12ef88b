# Copyright (c) 2026 NASK. All rights reserved.

import enum
import unittest
from typing import (
    Any,
    Literal,
    Optional,
    Protocol,
    TypeVar,
    Union,
)

from unittest_expander import (
    expand,
    foreach,
    param,
)

from maptoobject.exceptions import ConverterIllegalArgumentError
from maptoobject.type_descriptors import (
    TypeDescriptor,
    is_assignable,
    is_concrete,
    type_name,
)


T = TypeVar('T')


class Color(enum.Enum):
    RED = 1


class Walker(Protocol):
    def walk(self): ...


class Base:
    pass


class Derived(Base):
    pass


@expand
class Test__TypeDescriptor_of_slot(unittest.TestCase):

    @foreach(
        param(int).label('int'),
        param(str).label('str'),
        param(list[int]).label('list_of_int'),
        param(dict[str, Optional[int]]).label('dict_with_optional_values'),
        param(Union[int, str]).label('non_optional_union'),
        param(Color).label('enum'),
        param(Any).label('any'),
        param(T).label('type_var'),
    )
    def test_plain(self, declared_type):
        descriptor = TypeDescriptor.of_slot('field', declared_type)
        self.assertFalse(descriptor.is_optional_wrapped)
        self.assertEqual(descriptor.declared_type, declared_type)
        self.assertIsNone(descriptor.inner_type)

    @foreach(
        param(Optional[int], int).label('Optional'),
        param(Union[int, None], int).label('Union_with_None'),
        param(Union[None, int], int).label('Union_with_None_first'),
        param(int | None, int).label('pipe_union'),
        param(Optional[list[str]], list[str]).label('generic_alias'),
        param(Optional[Color], Color).label('enum'),
    )
    def test_optional_wrapped(self, declared_type, expected_inner_type):
        descriptor = TypeDescriptor.of_slot('field', declared_type)
        self.assertTrue(descriptor.is_optional_wrapped)
        self.assertIs(descriptor.declared_type, Optional)
        self.assertEqual(descriptor.inner_type, expected_inner_type)
        self.assertEqual(descriptor.inner(), TypeDescriptor.plain(expected_inner_type))

    def test_raw_optional(self):
        with self.assertRaises(ConverterIllegalArgumentError) as cm:
            TypeDescriptor.of_slot('field', Optional)
        self.assertEqual(
            cm.exception.message,
            "Raw types are not supported. Field 'field' is 'Optional'.")

    @foreach(
        param(Optional[Any], 'Any'),
        param(Optional[T], 'T'),
        param(Union[int, str, None], 'int | str'),
        param(Optional[Literal['a']], "Literal['a']"),
    )
    def test_wildcard_optional(self, declared_type, expected_param_name):
        with self.assertRaises(ConverterIllegalArgumentError) as cm:
            TypeDescriptor.of_slot('field', declared_type)
        self.assertEqual(
            cm.exception.message,
            "Wildcards are not supported. Field 'field' is 'Optional[{}]'.".format(
                expected_param_name))

    def test_equality(self):
        self.assertEqual(
            TypeDescriptor.of_slot('a', Optional[list[int]]),
            TypeDescriptor.of_slot('b', list[int] | None))
        self.assertNotEqual(
            TypeDescriptor.of_slot('a', Optional[list[int]]),
            TypeDescriptor.of_slot('a', Optional[list[str]]))
        self.assertNotEqual(
            TypeDescriptor.of_slot('a', Optional[int]),
            TypeDescriptor.of_slot('a', int))
        self.assertEqual(
            hash(TypeDescriptor.plain(list[int])),
            hash(TypeDescriptor.plain(list[int])))

    def test_immutable(self):
        descriptor = TypeDescriptor.plain(int)
        with self.assertRaises(AttributeError):
            descriptor.declared_type = str

    @foreach(
        param(TypeDescriptor.plain(int), 'int'),
        param(TypeDescriptor.plain(Color), __name__ + '.Color'),
        param(TypeDescriptor.optional_wrapped(str), 'Optional[str]'),
        param(TypeDescriptor.optional_wrapped(list[Color]),
              'Optional[list[{}.Color]]'.format(__name__)),
    )
    def test_name(self, descriptor, expected_name):
        self.assertEqual(descriptor.name, expected_name)


@expand
class Test__type_name(unittest.TestCase):

    @foreach(
        param(int, 'int'),
        param(type(None), 'None'),
        param(Any, 'Any'),
        param(Base, __name__ + '.Base'),
        param(Derived, __name__ + '.Derived'),
        param(dict[str, list[Base]], 'dict[str, list[{}.Base]]'.format(__name__)),
        param(tuple[int, ...], 'tuple[int, ...]'),
        param(Union[int, bytes], 'int | bytes'),
        param(Literal['x', 2], "Literal['x', 2]"),
        param(T, 'T'),
    )
    def test(self, tp, expected_name):
        self.assertEqual(type_name(tp), expected_name)


@expand
class Test__is_concrete(unittest.TestCase):

    @foreach(
        param(int, True),
        param(Base, True),
        param(list[T], True),
        param(dict[str, Any], True),
        param(Any, False),
        param(T, False),
        param(Union[int, str], False),
        param(Literal[1], False),
    )
    def test(self, tp, expected_result):
        self.assertIs(is_concrete(tp), expected_result)


@expand
class Test__is_assignable(unittest.TestCase):

    @foreach(
        param(42, int, True),
        param(True, bool, True),
        param(True, int, False),
        param(42, float, False),
        param(4.2, float, True),
        param(1j, complex, True),
        param('a', str, True),
        param(b'a', str, False),
        param(b'a', bytes, True),
        param(bytearray(b'a'), bytes, False),
        param(Derived(), Base, True),
        param(Base(), Derived, False),
        param(Color.RED, Color, True),
        param('RED', Color, False),
        param([1, 2], list[int], True),
        param(['a'], list[int], True),
        param({}, list[int], False),
        param(42, Union[str, int], True),
        param(4.2, Union[str, int], False),
        param('a', Literal['a', 'b'], True),
        param('c', Literal['a', 'b'], False),
        param(None, Any, True),
        param(None, object, True),
        param(object(), T, True),
    )
    def test(self, value, declared_type, expected_result):
        self.assertIs(is_assignable(value, declared_type), expected_result)

    def test_non_runtime_checkable_protocol(self):
        self.assertTrue(is_assignable(object(), Walker))
