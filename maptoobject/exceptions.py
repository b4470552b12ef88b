# Copyright (c) 2026 NASK. All rights reserved.

"""
Exception classes raised by the *maptoobject* machinery.

All of them are subclasses of :exc:`ConverterError`, so a caller can
catch them broadly (``except ConverterError``) or narrowly (e.g.
``except ConverterNullValueError``). A few of them additionally derive
from a built-in exception class whose meaning they share (e.g.
:exc:`ConverterTypeMismatchError` is also a :exc:`TypeError`).
"""


__all__ = [
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


def join_quoted(names):
    """
    >>> join_quoted(['one', 'Two', 'three'])
    "'one', 'Two', 'three'"
    >>> join_quoted([])
    "''"
    """
    return "'{}'".format("', '".join(names))


#
# Generic mix-ins
#

class _NamesListingErrorMixin(object):

    """
    Mix-in for exceptions concerning a bunch of keys or field names.

    Each instance of such a class:

    * should be initialized with one argument: an iterable of names
      (strings), in the order they are to be reported;

    * exposes them (as a tuple) as the :attr:`names` attribute (for
      possible later inspection);

    * has its message built from the :attr:`msg_template` class
      attribute (a pattern with one ``{}`` placeholder into which the
      quoted, comma-separated names are put).
    """

    #: (to be overridden in subclasses)
    msg_template = None

    def __init__(self, names):
        self.names = tuple(names)
        super(_NamesListingErrorMixin, self).__init__(
            self.msg_template,
            join_quoted(self.names))


#
# Actual exception classes
#

class ConverterError(Exception):

    """
    The base class for all converter exceptions.

    The constructor takes an optional message pattern and any number
    of positional arguments to be :meth:`str.format`-ted into it. If
    the pattern is omitted, :attr:`default_message` is used.

    >>> exc = ConverterError("Value '{}' is not {}.", 'spam', 'ham')
    >>> exc.message
    "Value 'spam' is not ham."
    >>> str(exc)
    "Value 'spam' is not ham."
    >>> exc.cause is None
    True

    >>> str(ConverterError())
    'Conversion failed.'

    >>> str(ConverterError('Braces {} are kept when no args given.'))
    'Braces {} are kept when no args given.'
    """

    #: (overridable in subclasses)
    default_message = 'Conversion failed.'

    def __init__(self, message_pattern=None, /, *format_args):
        if message_pattern is None:
            message = self.default_message
        elif format_args:
            message = message_pattern.format(*format_args)
        else:
            message = message_pattern
        super(ConverterError, self).__init__(message)

    @property
    def message(self):
        return self.args[0]

    @property
    def cause(self):
        """The exception this one has been chained to (if any)."""
        return self.__cause__


class ConverterIllegalArgumentError(ConverterError, ValueError):

    """
    Raised when an argument does not meet the requirements, e.g.:

    * the map to convert is `None` or contains `None` keys;
    * the target class is `None` or is not a concrete class (it is
      primitive-like, an enum, an interface/protocol, an abstract class
      or just a type annotation);
    * a field of the target class is a raw or wildcard `Optional`;
    * a converter is being registered for `None`, for `Optional`, or
      is not a callable.
    """


class ConverterKeyDuplicateError(_NamesListingErrorMixin, ConverterIllegalArgumentError):

    """
    Raised when the converter is in the keys-case-insensitive mode and
    the map to convert contains keys which are equal ignoring case.

    >>> exc = ConverterKeyDuplicateError(['one', 'oNe', 'two', 'twO'])
    >>> str(exc)
    "Keys 'one', 'oNe', 'two', 'twO' are duplicates (converter is key case insensitive)."
    >>> exc.keys
    ('one', 'oNe', 'two', 'twO')
    >>> isinstance(exc, ConverterIllegalArgumentError)
    True
    """

    msg_template = 'Keys {} are duplicates (converter is key case insensitive).'

    @property
    def keys(self):
        return self.names


class ConverterFieldDuplicateError(_NamesListingErrorMixin, ConverterError):

    """
    Raised when the converter is in the keys-case-insensitive mode and
    the target class has fields whose names are equal ignoring case.

    >>> str(ConverterFieldDuplicateError(['text', 'TEXT']))
    "Fields 'text', 'TEXT' are duplicates (converter is key case insensitive)."
    """

    msg_template = 'Fields {} are duplicates (converter is key case insensitive).'

    @property
    def field_names(self):
        return self.names


class ConverterMissingFieldsError(_NamesListingErrorMixin, ConverterError):

    """
    Raised when the target class does not have a field for some key(s)
    found in the map.

    >>> exc = ConverterMissingFieldsError(['four', 'five'])
    >>> str(exc)
    "No fields for keys: 'four', 'five'."
    >>> exc.keys
    ('four', 'five')
    """

    msg_template = 'No fields for keys: {}.'

    @property
    def keys(self):
        return self.names


class ConverterMissingValuesError(_NamesListingErrorMixin, ConverterError):

    """
    Raised when the target class has some field(s) for which there are
    no values in the map.

    >>> str(ConverterMissingValuesError(['two', 'three']))
    "No values for fields: 'two', 'three'."
    """

    msg_template = 'No values for fields: {}.'

    @property
    def field_names(self):
        return self.names


class ConverterNullValueError(_NamesListingErrorMixin, ConverterError):

    """
    Raised when the value is `None` for a non-`Optional` field (for
    which no converter has been registered).

    >>> str(ConverterNullValueError(['street', 'postcode']))
    "Null values require fields to be Optional. Null values for fields: 'street', 'postcode'."
    """

    msg_template = 'Null values require fields to be Optional. Null values for fields: {}.'

    @property
    def field_names(self):
        return self.names


class ConverterEnumCreationError(ConverterError, ValueError):

    """
    Raised when automatic conversion to an enum fails, i.e., when:

    * the enum does not have a member with the given name,
    * or the value is not a `str`.

    Both cases can be prevented by registering a converter for the enum.
    """


class ConverterTypeMismatchError(ConverterError, TypeError):

    """
    Raised when the type of the value is not compatible with the type
    of the field.
    """


class RegisteredConverterError(ConverterError):

    """
    Raised when a registered converter:

    * raises an exception (then that exception is the :attr:`cause`),
    * or returns `None` for a non-`Optional` field,
    * or returns a value of a type different than the type parameter
      of the `Optional` field.
    """


class ConverterUnknownError(ConverterError):

    """
    Raised when converting fails for any reason that was not
    anticipated. The original exception is the :attr:`cause`.

    >>> str(ConverterUnknownError())   # doctest: +ELLIPSIS
    'If you see this exception, it means that you have found a use case which was not considered...'
    """

    default_message = (
        'If you see this exception, it means that you have found a use case '
        'which was not considered before. Please report it to the maintainers '
        'of the *maptoobject* library.')
