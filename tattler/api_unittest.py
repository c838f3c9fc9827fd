#!/usr/bin/python

"""Walks through the public tattler API the way a test suite would."""

import unittest

import tattler
from tattler.shared.error import VerificationError


class MyObject(object):

    def __init__(self):
        self.greeting = lambda: "hello"
        self.farewell = lambda *names: "goodbye"


class api_test(unittest.TestCase):

    def setUp(self):
        self.mock_obj = tattler.mock(MyObject())

    def test_instance_of_template(self):
        self.assertTrue(isinstance(self.mock_obj, MyObject))
        self.assertTrue(tattler.is_mock(self.mock_obj))

    def test_greeting_scenario(self):
        self.mock_obj.greeting()
        tattler.verify(self.mock_obj).greeting()
        other_scope = object()
        try:
            tattler.verify(self.mock_obj).greeting.call(other_scope)
        except VerificationError as err:
            self.assertEqual(
                str(err), "Wanted but not invoked: obj.greeting(), "
                          "'this' being equal to %s" % other_scope)
        else:
            self.fail('VerificationError not raised')

    def test_farewell_scenario(self):
        def stub(this, *args):
            return 'stub result'

        tattler.when(self.mock_obj).farewell(
            'foo', tattler.less_than(10), tattler.anything()).then(stub)
        self.assertEqual(self.mock_obj.farewell('foo', 9, {}), 'stub result')
        self.assertTrue(self.mock_obj.farewell('foo', 11, 'bar') is None)
        self.assertTrue(self.mock_obj.farewell('foo', 9) is None)
        tattler.verify(self.mock_obj, tattler.times(3)).farewell('foo')
        tattler.verify(self.mock_obj, tattler.never()).greeting()
        tattler.verify_no_more_interactions(self.mock_obj)

    def test_prefix_law(self):
        self.mock_obj.farewell('a', 'b')
        tattler.verify(self.mock_obj).farewell('a', 'b')
        self.assertRaises(VerificationError,
                          tattler.verify(self.mock_obj).farewell,
                          'a', 'b', 'c')
        self.mock_obj.farewell('a', 'b', 'c')
        tattler.verify(self.mock_obj, tattler.times(2)).farewell('a', 'b')

    def test_scope_law(self):
        first, second = object(), object()
        self.mock_obj.farewell.call(first)
        self.assertRaises(VerificationError,
                          tattler.verify(self.mock_obj).farewell.apply,
                          second, [])
        tattler.verify(self.mock_obj).farewell.apply(first, [])


if __name__ == '__main__':
    unittest.main()
