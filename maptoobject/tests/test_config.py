# Copyright (c) 2026 NASK. All rights reserved.

import os.path
import shutil
import tempfile
import unittest

from unittest_expander import (
    expand,
    foreach,
    param,
)

from maptoobject.config import (
    ConfigError,
    ConverterConfig,
)



# NOTE: the basics of ConverterConfig.from_settings() are already
# covered by its doctests



@expand
class Test__ConverterConfig__from_settings(unittest.TestCase):

    @foreach(
        param(settings={}, expected=True),
        param(settings={'map_to_object.key_case_sensitive': 'yes'}, expected=True),
        param(settings={'map_to_object.key_case_sensitive': 'ON'}, expected=True),
        param(settings={'map_to_object.key_case_sensitive': ' 0 '}, expected=False),
        param(settings={'map_to_object.key_case_sensitive': 'False'}, expected=False),
        param(settings={'map_to_object.key_case_sensitive': False}, expected=False),
        param(settings={'other.key_case_sensitive': 'no'}, expected=True),
        param(settings={'map_to_objects.key_case_sensitive': 'no'}, expected=True),
    )
    def test_ok(self, settings, expected):
        config = ConverterConfig.from_settings(settings)
        self.assertIs(config.key_case_sensitive, expected)

    @foreach(
        param(settings={'map_to_object.key_case_sensitive': 'maybe'}).label('bad_value'),
        param(settings={'map_to_object.key_case_sensitive': ''}).label('empty_value'),
        param(settings={'map_to_object.keys_case_sensitive': 'no'}).label('unknown_option'),
    )
    def test_error(self, settings):
        with self.assertRaises(ConfigError) as cm:
            ConverterConfig.from_settings(settings)
        self.assertTrue(str(cm.exception).startswith('[configuration-related error] '))


@expand
class Test__ConverterConfig__from_file(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.tmp_dir)

    def _write_config(self, content):
        path = os.path.join(self.tmp_dir, 'maptoobject.conf')
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    @foreach(
        param(content='', expected=True),
        param(content='[other]\nfoo = bar\n', expected=True),
        param(content='[map_to_object]\n', expected=True),
        param(content='[map_to_object]\nkey_case_sensitive = no\n', expected=False),
        param(content='[map_to_object]\nkey_case_sensitive: Off\n', expected=False),
        param(content='[map_to_object]\nKEY_CASE_SENSITIVE = n\n', expected=False),
    )
    def test_ok(self, content, expected):
        path = self._write_config(content)
        config = ConverterConfig.from_file(path)
        self.assertIs(config.key_case_sensitive, expected)

    @foreach(
        param(content='[map_to_object]\nkey_case_sensitive = perhaps\n').label('bad_value'),
        param(content='[map_to_object]\nfoo = 1\n').label('unknown_option'),
        param(content='key_case_sensitive = no\n').label('no_section_header'),
        param(content='[map_to_object]\n[map_to_object]\n').label('duplicate_section'),
    )
    def test_error(self, content):
        path = self._write_config(content)
        with self.assertRaises(ConfigError):
            ConverterConfig.from_file(path)

    def test_nonexistent_file(self):
        with self.assertRaises(ConfigError) as cm:
            ConverterConfig.from_file(os.path.join(self.tmp_dir, 'nonexistent.conf'))
        self.assertIn('does not exist', str(cm.exception))
