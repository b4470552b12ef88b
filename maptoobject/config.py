# Copyright (c) 2026 NASK. All rights reserved.

"""
Configuration of :class:`~maptoobject.converter.MapToObjectConverter`.

The configuration can be obtained either from a Pyramid-like *settings*
mapping (whose keys are in the `<section name>.<option name>` format)
or from an INI-like config file, e.g.:

    [map_to_object]
    key_case_sensitive = no

Currently only one option is supported:

* `key_case_sensitive` (a YES/NO flag; default: `yes`).
"""

import configparser
import dataclasses
import os.path

from maptoobject.common_helpers import (
    ascii_str,
    make_exc_ascii_str,
    str_to_bool,
)
from maptoobject.log_helpers import get_logger


LOGGER = get_logger(__name__)

SECTION_NAME = 'map_to_object'

OPTION_DEFAULTS = {
    'key_case_sensitive': 'yes',
}


class ConfigError(Exception):

    """
    A generic configuration-related exception class.

    >>> print(ConfigError('Some Message'))
    [configuration-related error] Some Message
    """

    def __str__(self):
        return '[configuration-related error] ' + super().__str__()


@dataclasses.dataclass(frozen=True)
class ConverterConfig:

    """
    Parsed configuration of the converter.

    >>> ConverterConfig.from_settings({'map_to_object.key_case_sensitive': 'No'})
    ConverterConfig(key_case_sensitive=False)
    >>> ConverterConfig.from_settings({'some_other_section.foo': 'bar'})
    ConverterConfig(key_case_sensitive=True)
    >>> ConverterConfig.from_settings({'map_to_object.foo': 'bar'})
    Traceback (most recent call last):
      ...
    maptoobject.config.ConfigError: [configuration-related error] unknown option(s) in section 'map_to_object': 'foo'
    """

    key_case_sensitive: bool = True

    @classmethod
    def from_settings(cls, settings):
        prefix = SECTION_NAME + '.'
        raw_options = {
            key[len(prefix):]: str(value)
            for key, value in settings.items()
            if key.startswith(prefix)}
        return cls._from_raw_options(raw_options)

    @classmethod
    def from_file(cls, path):
        if not os.path.isfile(path):
            raise ConfigError('config file {!a} does not exist'.format(path))
        parser = configparser.ConfigParser(interpolation=None)
        try:
            with open(path, encoding='utf-8') as f:
                parser.read_file(f, source=path)
        except (OSError, configparser.Error) as exc:
            raise ConfigError('cannot read config file {!a} ({})'.format(
                path, make_exc_ascii_str(exc))) from exc
        if parser.has_section(SECTION_NAME):
            raw_options = dict(parser.items(SECTION_NAME))
        else:
            LOGGER.debug('No [%s] section in %a, using defaults', SECTION_NAME, path)
            raw_options = {}
        return cls._from_raw_options(raw_options)

    @classmethod
    def _from_raw_options(cls, raw_options):
        unknown = sorted(set(raw_options).difference(OPTION_DEFAULTS))
        if unknown:
            raise ConfigError('unknown option(s) in section {!a}: {}'.format(
                SECTION_NAME, ', '.join(map(ascii, unknown))))
        options = dict(OPTION_DEFAULTS, **raw_options)
        try:
            key_case_sensitive = str_to_bool(options['key_case_sensitive'].strip())
        except ValueError as exc:
            raise ConfigError('invalid value of option {!a} in section {!a}: {}'.format(
                'key_case_sensitive', SECTION_NAME, ascii_str(exc))) from exc
        return cls(key_case_sensitive=key_case_sensitive)
