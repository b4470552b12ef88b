# Copyright (c) 2026 NASK. All rights reserved.

import logging


LIBRARY_LOGGER_NAME = 'maptoobject'


def get_logger(name):
    """
    Get the logger for the given module of this library.

    The module must belong to the `maptoobject` package, so that the
    logger is a descendant of the library logger (the one the
    `NullHandler` is attached to).

    >>> get_logger('maptoobject.converters').name
    'maptoobject.converters'
    >>> get_logger('maptoobject') is logging.getLogger('maptoobject')
    True
    >>> get_logger('maptoobjectx.foo')              # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: 'maptoobjectx.foo' is not a name of a maptoobject module
    """
    if not (name == LIBRARY_LOGGER_NAME
            or name.startswith(LIBRARY_LOGGER_NAME + '.')):
        raise ValueError(
            '{!a} is not a name of a {} module'.format(name, LIBRARY_LOGGER_NAME))
    return logging.getLogger(name)


# handlers are to be configured by the application
logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())
