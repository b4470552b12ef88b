# Copyright (c) 2026 NASK. All rights reserved.

import dataclasses
import inspect
import typing
from typing import ClassVar

from maptoobject.common_helpers import make_exc_ascii_str
from maptoobject.exceptions import ConverterIllegalArgumentError
from maptoobject.type_descriptors import (
    TypeDescriptor,
    type_name,
)


@dataclasses.dataclass(frozen=True)
class Slot:

    """
    A named, typed field of a target class.

    Note: `name` is unique within `declaring_type`, but not necessarily
    within the whole inheritance hierarchy.
    """

    name: str
    type_descriptor: TypeDescriptor
    declaring_type: type


def slots_of(target_type):
    """
    Get the list of slots (fields) of the given class.

    The slots are taken from the annotations declared in the bodies of
    the class and of its ancestor classes (in the reversed MRO order,
    i.e., the most remote ancestors first, excluding `object`); within
    one class -- in the order of declaration.

    Skipped are annotations of class variables (`ClassVar[...]`), of
    `dataclasses.InitVar` pseudo-fields, the `dataclasses.KW_ONLY`
    marker and dunder names.

    If a class redeclares a field already declared by an ancestor,
    *both* slots are included; the slot of the redeclaring class comes
    later, so its value is the one the instance attribute ends up with.

    >>> class Base:
    ...     a: int
    ...     b: 'str'
    ...     registry: ClassVar[dict] = {}
    ...
    >>> class Derived(Base):
    ...     c: bytes | None
    ...     a: float
    ...
    >>> [(s.name, s.type_descriptor.name, s.declaring_type.__name__)
    ...  for s in slots_of(Derived)]                     # doctest: +NORMALIZE_WHITESPACE
    [('a', 'int', 'Base'),
     ('b', 'str', 'Base'),
     ('c', 'Optional[bytes]', 'Derived'),
     ('a', 'float', 'Derived')]
    """
    slots = []
    for klass in reversed(target_type.__mro__):
        if klass is object:
            continue
        own_annotations, resolved = _get_annotations(klass)
        if not own_annotations:
            continue
        for name in own_annotations:
            if _is_reserved_name(name):
                continue
            declared_type = resolved[name]
            if _is_not_instance_field(declared_type):
                continue
            slots.append(Slot(
                name=name,
                type_descriptor=TypeDescriptor.of_slot(name, declared_type),
                declaring_type=klass))
    return slots


def _get_annotations(klass):
    try:
        own_annotations = inspect.get_annotations(klass)
        if not own_annotations:
            return own_annotations, {}
        # (for names declared in `klass` itself, the values are taken
        # from the annotations of `klass`, not of its ancestors)
        return own_annotations, typing.get_type_hints(klass)
    except Exception as exc:
        raise ConverterIllegalArgumentError(
            "Cannot resolve type annotations of class '{}' ({}).",
            type_name(klass), make_exc_ascii_str(exc)) from exc


def _is_reserved_name(name):
    return name.startswith('__') and name.endswith('__')


def _is_not_instance_field(declared_type):
    return (declared_type is ClassVar
            or typing.get_origin(declared_type) is ClassVar
            or isinstance(declared_type, dataclasses.InitVar)
            or declared_type is dataclasses.InitVar
            or declared_type is dataclasses.KW_ONLY)
