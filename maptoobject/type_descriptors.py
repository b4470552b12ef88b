# Copyright (c) 2026 NASK. All rights reserved.

"""
Type descriptors of fields, and the type-related helpers they need.

A *type descriptor* tells whether the declared type of a field is
*optional-wrapped* (i.e., is `Optional[X]`, `Union[X, None]` or
`X | None`) -- and, if it is, what its *inner type* (`X`) is -- or
*plain* (any other type).
"""

import dataclasses
import enum
import types
from typing import (
    Any,
    Literal,
    Optional,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

from maptoobject.exceptions import ConverterIllegalArgumentError
from maptoobject.typing_helpers import TypeSpec


NoneType = type(None)

# the types whose instances are required to be *exactly* of the
# declared type (e.g., `True` is *not* accepted as an `int` value)
PRIMITIVE_LIKE_TYPES = frozenset({
    bool,
    int,
    float,
    complex,
    str,
    bytes,
})


#
# Type introspection helpers
#

def is_plain_class(tp):
    """
    >>> is_plain_class(int), is_plain_class(list[int]), is_plain_class(Optional[int])
    (True, False, False)
    >>> is_plain_class(Any)
    False
    """
    # (note: `isinstance(list[int], type)` is true on some Python
    # versions, and so is `isinstance(Any, type)`)
    return (isinstance(tp, type)
            and not isinstance(tp, types.GenericAlias)
            and tp is not Any)


def is_union(tp):
    """
    >>> is_union(Union[int, str]), is_union(int | None), is_union(int)
    (True, True, False)
    """
    origin = get_origin(tp)
    return origin is Union or origin is types.UnionType


def is_optional_wrapping(tp):
    """
    Is the given type `Optional` -- either bare or with a parameter?

    >>> is_optional_wrapping(Optional), is_optional_wrapping(Optional[str])
    (True, True)
    >>> is_optional_wrapping(Union[str, int, None]), is_optional_wrapping(bytes | None)
    (True, True)
    >>> is_optional_wrapping(Union[str, int]), is_optional_wrapping(str)
    (False, False)
    """
    return tp is Optional or (is_union(tp) and NoneType in get_args(tp))


def is_enum_type(tp):
    return is_plain_class(tp) and issubclass(tp, enum.Enum)


def is_concrete(tp):
    """
    Is the given type acceptable as the parameter of `Optional`?

    >>> T = TypeVar('T')
    >>> is_concrete(int), is_concrete(list[T]), is_concrete(T), is_concrete(Any)
    (True, True, False, False)
    >>> is_concrete(Union[int, str]), is_concrete(Literal['a'])
    (False, False)
    """
    if tp is Any or isinstance(tp, TypeVar) or is_union(tp):
        return False
    return is_plain_class(tp) or is_plain_class(get_origin(tp))


def runtime_class_of(tp):
    """
    Get the class that values of the given (concrete) type are instances of.

    >>> runtime_class_of(int), runtime_class_of(dict[str, int])
    (<class 'int'>, <class 'dict'>)
    """
    if is_plain_class(tp):
        return tp
    return get_origin(tp)


def type_name(tp):
    """
    Get the fully-qualified textual form of the given type.

    >>> type_name(int), type_name(NoneType), type_name(Any)
    ('int', 'None', 'Any')
    >>> type_name(enum.Enum)
    'enum.Enum'
    >>> type_name(list[int]), type_name(dict[str, list[bytes]])
    ('list[int]', 'dict[str, list[bytes]]')
    >>> type_name(Union[int, str]), type_name(Optional[float])
    ('int | str', 'float | None')
    >>> type_name(Literal['a', 1]), type_name(TypeVar('T'))
    ("Literal['a', 1]", 'T')
    """
    if tp is None or tp is NoneType:
        return 'None'
    if tp is Any:
        return 'Any'
    if isinstance(tp, TypeVar):
        return tp.__name__
    if is_union(tp):
        return ' | '.join(map(type_name, get_args(tp)))
    origin = get_origin(tp)
    args = get_args(tp)
    if origin is Literal:
        return 'Literal[{}]'.format(', '.join(map(repr, args)))
    if origin is not None and args:
        return '{}[{}]'.format(type_name(origin), ', '.join(map(_type_arg_name, args)))
    if is_plain_class(tp):
        if tp.__module__ == 'builtins':
            return tp.__qualname__
        return '{}.{}'.format(tp.__module__, tp.__qualname__)
    return _strip_typing_prefix(repr(tp))


def _type_arg_name(arg):
    if isinstance(arg, (list, tuple)):
        return '[{}]'.format(', '.join(map(_type_arg_name, arg)))
    if arg is Ellipsis:
        return '...'
    return type_name(arg)


def _strip_typing_prefix(s):
    prefix = 'typing.'
    return s[len(prefix):] if s.startswith(prefix) else s


def is_assignable(value, declared_type):
    """
    Is the given value compatible with the given (plain) declared type?

    >>> is_assignable(42, int), is_assignable(True, int), is_assignable(42, float)
    (True, False, False)
    >>> is_assignable([1], list[str]), is_assignable((1,), list[int])
    (True, False)
    >>> is_assignable('a', Union[int, str]), is_assignable(b'a', Union[int, str])
    (True, False)
    >>> is_assignable('a', Literal['a', 'b']), is_assignable(1, Literal[True])
    (True, False)
    >>> is_assignable(object(), Any), is_assignable(object(), TypeVar('T'))
    (True, True)
    """
    if declared_type is Any or declared_type is object or isinstance(declared_type, TypeVar):
        return True
    if declared_type in PRIMITIVE_LIKE_TYPES:
        return type(value) is declared_type
    if is_union(declared_type):
        return any(is_assignable(value, arg) for arg in get_args(declared_type))
    if get_origin(declared_type) is Literal:
        return any(type(value) is type(lit) and value == lit
                   for lit in get_args(declared_type))
    cls = runtime_class_of(declared_type)
    if not is_plain_class(cls):
        # (other typing constructs cannot be checked at runtime)
        return True
    try:
        return isinstance(value, cls)
    except TypeError:
        # (e.g., a protocol class that is not runtime-checkable)
        return True


#
# Actual type descriptor stuff
#

@dataclasses.dataclass(frozen=True)
class TypeDescriptor:

    """
    Describes the declared type of a field.

    For a *plain* type descriptor `declared_type` is the declared type
    and `inner_type` is `None`. For an *optional-wrapped* one
    `declared_type` is `typing.Optional` and `inner_type` is the
    concrete type parameter.

    >>> d = TypeDescriptor.of_slot('x', Optional[int])
    >>> d.is_optional_wrapped, d.inner_type, d.name
    (True, <class 'int'>, 'Optional[int]')
    >>> d == TypeDescriptor.of_slot('y', Union[None, int]) == TypeDescriptor.optional_wrapped(int)
    True
    >>> d.inner() == TypeDescriptor.plain(int)
    True

    >>> d = TypeDescriptor.of_slot('x', list[str])
    >>> d.is_optional_wrapped, d.declared_type, d.name
    (False, list[str], 'list[str]')
    >>> d == TypeDescriptor.plain(list[bytes])
    False

    >>> TypeDescriptor.of_slot('z', Optional)
    Traceback (most recent call last):
      ...
    maptoobject.exceptions.ConverterIllegalArgumentError: Raw types are not supported. Field 'z' is 'Optional'.
    >>> TypeDescriptor.of_slot('x', Optional[TypeVar('T')])
    Traceback (most recent call last):
      ...
    maptoobject.exceptions.ConverterIllegalArgumentError: Wildcards are not supported. Field 'x' is 'Optional[T]'.
    """

    declared_type: TypeSpec
    inner_type: TypeSpec = None

    @classmethod
    def plain(cls, declared_type):
        return cls(declared_type)

    @classmethod
    def optional_wrapped(cls, inner_type):
        return cls(Optional, inner_type)

    @classmethod
    def of_slot(cls, slot_name, declared_type):
        if declared_type is Optional:
            raise ConverterIllegalArgumentError(
                "Raw types are not supported. Field '{}' is 'Optional'.",
                slot_name)
        if is_optional_wrapping(declared_type):
            params = tuple(arg for arg in get_args(declared_type) if arg is not NoneType)
            param = params[0] if len(params) == 1 else Union[params]
            if not is_concrete(param):
                raise ConverterIllegalArgumentError(
                    "Wildcards are not supported. Field '{}' is 'Optional[{}]'.",
                    slot_name, type_name(param))
            return cls.optional_wrapped(param)
        return cls.plain(declared_type)

    @property
    def is_optional_wrapped(self):
        return self.inner_type is not None

    @property
    def name(self):
        if self.is_optional_wrapped:
            return 'Optional[{}]'.format(type_name(self.inner_type))
        return type_name(self.declared_type)

    def inner(self):
        """Get the plain type descriptor of the inner type."""
        assert self.is_optional_wrapped
        return self.plain(self.inner_type)
