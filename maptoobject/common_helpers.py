# Copyright (c) 2026 NASK. All rights reserved.

import abc
import sys
from collections.abc import Mapping


class NormalizedMappingView(Mapping):

    """
    A read-only view of a mapping whose keys are looked up after being
    normalized (see: :meth:`normalize_key`).

    The original keys are kept (they are what iteration yields). The
    underlying mapping is *not* copied: only the normalized-key index
    is built when the view is created, so the view must not outlive
    any modification of that mapping.

    If two keys of the underlying mapping are equal after being
    normalized, the later one wins (the caller is expected to prevent
    that, see: :meth:`iter_colliding_keys`).
    """

    def __init__(self, mapping, /):
        self._mapping = mapping
        self._index = {
            self.normalize_key(key): key
            for key in mapping}

    @classmethod
    @abc.abstractmethod
    def normalize_key(cls, key):
        return key

    def __getitem__(self, key):
        nkey = self.normalize_key(key)
        return self._mapping[self._index[nkey]]

    def __iter__(self):
        return iter(self._mapping)

    def __len__(self):
        return len(self._mapping)

    def __contains__(self, key):
        return self.normalize_key(key) in self._index

    def __repr__(self):
        return '{0.__class__.__qualname__}({1!r})'.format(self, dict(self._mapping.items()))

    def iter_normalized_items(self):
        for nkey, key in self._index.items():
            yield nkey, self._mapping[key]

    @classmethod
    def iter_colliding_keys(cls, keys):
        """
        Yield (in their original order) those of the given keys that are
        equal to some *other* key after normalization.
        """
        keys = list(keys)
        normalize_key = cls.normalize_key
        nkey_to_count = {}
        for key in keys:
            nkey = normalize_key(key)
            nkey_to_count[nkey] = nkey_to_count.get(nkey, 0) + 1
        for key in keys:
            if nkey_to_count[normalize_key(key)] > 1:
                yield key


class CIMappingView(NormalizedMappingView):

    """
    A read-only mapping view that provides case-insensitive key lookup
    but keeps original keys.

    (Intended to be used with string keys only).

    >>> v = CIMappingView({'Aa': 1, 'B': 2})

    >>> v['aa'], v['AA'], v['Aa'], v['aA']
    (1, 1, 1, 1)
    >>> v['b'], v['B']
    (2, 2)
    >>> 'aA' in v, 'bb' in v
    (True, False)
    >>> v['c']
    Traceback (most recent call last):
      ...
    KeyError: 'c'

    >>> v
    CIMappingView({'Aa': 1, 'B': 2})
    >>> list(v), len(v)
    (['Aa', 'B'], 2)
    >>> sorted(v.iter_normalized_items())
    [('aa', 1), ('b', 2)]

    >>> list(CIMappingView.iter_colliding_keys(['one', 'two', 'oNe', 'three', 'ONE']))
    ['one', 'oNe', 'ONE']
    >>> list(CIMappingView.iter_colliding_keys(['one', 'two']))
    []
    """

    @classmethod
    def normalize_key(cls, key):
        key = super().normalize_key(key)
        return key.lower()


def ascii_str(obj):
    r"""
    Safely convert the given object to an ASCII-only :class:`str`.

    >>> ascii_str('Ech, ale błąd!')
    'Ech, ale b\\u0142\\u0105d!'
    >>> ascii_str(b'spam')
    'spam'
    >>> ascii_str(42)
    '42'
    """
    if isinstance(obj, (bytes, bytearray)):
        s = bytes(obj).decode('utf-8', 'surrogateescape')
    else:
        s = str(obj)
    return s.encode('ascii', 'backslashreplace').decode('ascii')


def make_exc_ascii_str(exc=None):
    r"""
    Generate an ASCII-only string representing the (given) exception.

    Args:
        `exc`:
            The given exception instance. If not given or `None` it will
            be retrieved automatically with `sys.exc_info()`.

    Returns:
        A textual representation (coerced to be an ASCII-only `str`
        instance) of the exception, containing the name of its class
        and, typically, also its normal `str()`-representation.

    >>> make_exc_ascii_str(RuntimeError('whoops!'))
    'RuntimeError: whoops!'
    >>> make_exc_ascii_str(ZeroDivisionError())
    'ZeroDivisionError'
    >>> make_exc_ascii_str(ValueError('Zaż\xf3łć'))
    'ValueError: Za\\u017c\\xf3\\u0142\\u0107'
    >>> make_exc_ascii_str()
    'Unknown exception (if any)'
    """
    if exc is None:
        exc = sys.exc_info()[1]
    if exc is None:
        return 'Unknown exception (if any)'
    # Note: to be consistent with standard error displays
    # we use the exc type's `__name__`, not `__qualname__`.
    exc_type_name = ascii_str(type(exc).__name__)
    exc_str = ascii_str(exc)
    if not exc_str:
        return exc_type_name
    return '{}: {}'.format(exc_type_name, exc_str)


def str_to_bool(s):
    """
    Return True or False, given one of the known strings (see examples below).

    >>> str_to_bool('1'), str_to_bool('y'), str_to_bool('Yes'), str_to_bool('on')
    (True, True, True, True)
    >>> str_to_bool('0'), str_to_bool('nO'), str_to_bool('false'), str_to_bool('off')
    (False, False, False, False)

    Other string values cause ValueError:

    >>> str_to_bool('unknown')        # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...

    Non-str values cause TypeError:

    >>> str_to_bool(True)             # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    TypeError: ...
    """
    if not isinstance(s, str):
        raise TypeError('{!a} is not a str'.format(s))
    s_lowercased = s.lower()
    try:
        return str_to_bool.LOWERCASE_TO_BOOL[s_lowercased]
    except KeyError:
        raise ValueError(str_to_bool.MESSAGE_PATTERN.format(ascii_str(s))) from None

str_to_bool.LOWERCASE_TO_BOOL = {
    '1': True,
    'y': True,
    'yes': True,
    't': True,
    'true': True,
    'on': True,

    '0': False,
    'n': False,
    'no': False,
    'f': False,
    'false': False,
    'off': False,
}

str_to_bool.MESSAGE_PATTERN = (
    '"{}" is not a valid YES/NO flag (expected one of: %s; or a '
    'variant of any of them with some letters upper-cased)' % (
        ', '.join('"{}"'.format(k) for k, v in sorted(
            str_to_bool.LOWERCASE_TO_BOOL.items(),
            key=lambda item: (item[1], item[0])))))
