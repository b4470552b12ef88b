# Copyright (c) 2026 NASK. All rights reserved.

import collections.abc as collections_abc
import unittest.mock as mock

from maptoobject.schema import slots_of


class TestCaseMixin(object):

    def assertEqualIncludingTypes(self, first, second, msg=None):
        self.assertEqual(first, second, msg=msg)
        if first is not mock.ANY and second is not mock.ANY:
            self.assertIs(type(first), type(second),
                          'type of {!a} ({}) is not type of {!a} ({})'
                          .format(first, type(first), second, type(second)))
        if (isinstance(first, collections_abc.Sequence)
              and not isinstance(first, (bytes, bytearray, str))):
            for val1, val2 in zip(first, second):
                self.assertEqualIncludingTypes(val1, val2)
        elif isinstance(first, collections_abc.Mapping):
            for key in first:
                self.assertEqualIncludingTypes(first[key], second[key])

    def assertFieldValues(self, instance, expected_field_values):
        """
        Check (including types) the values of the fields of the given
        object -- i.e., of the attributes corresponding to the slots
        of its class.
        """
        actual_field_values = {
            slot.name: getattr(instance, slot.name)
            for slot in slots_of(type(instance))}
        self.assertEqualIncludingTypes(actual_field_values, expected_field_values)
