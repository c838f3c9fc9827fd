#!/usr/bin/python

import abc
import logging
import unittest

from tattler import mock_factory
from tattler.shared import error
from tattler.shared.settings import settings
from tattler.state import get_state, is_mock


class MyObject(object):
    kind = 'greeter'

    def __init__(self):
        raise AssertionError('initializer must not run for mocks')

    def greeting(self):
        return "hello"

    def farewell(self, *names):
        return "goodbye"

    def _private(self):
        return 'private'

    @property
    def mood(self):
        return 'happy'

    @staticmethod
    def helper():
        return 'help'


class InstanceMethods(object):
    """Methods set up in the initializer, the way prototype-less code does."""

    def __init__(self):
        self.greeting = lambda: "hello"
        self.farewell = lambda: "goodbye"
        self.count = 3


class Interface(abc.ABC):

    @abc.abstractmethod
    def run(self):
        pass


class mock_test(unittest.TestCase):

    def test_instance_of_template(self):
        m = mock_factory.mock(MyObject)
        self.assertTrue(isinstance(m, MyObject))
        self.assertTrue(is_mock(m))

    def test_methods_are_replaced(self):
        m = mock_factory.mock(MyObject)
        for symbol in ('greeting', 'farewell', '_private', 'helper'):
            method = getattr(m, symbol)
            self.assertTrue(isinstance(method, mock_factory.mock_method))
            self.assertNotEqual(method, getattr(MyObject, symbol))
        self.assertEqual(get_state(m).symbols,
                         frozenset(['greeting', 'farewell', '_private',
                                    'helper']))

    def test_unstubbed_call_returns_none_and_is_recorded(self):
        m = mock_factory.mock(MyObject)
        self.assertEqual(m.greeting('hello', None, 5), None)
        calls = get_state(m).log.for_symbol('greeting')
        self.assertEqual(len(calls), 1)
        self.assertEqual(calls[0].args, ('hello', None, 5))
        self.assertTrue(calls[0].receiver is m)

    def test_explicit_receivers_are_recorded(self):
        m = mock_factory.mock(MyObject)
        scope = object()
        m.greeting.call(scope, 1)
        m.greeting.apply(scope, [1])
        calls = get_state(m).log.for_symbol('greeting')
        self.assertEqual([call.receiver for call in calls], [scope, scope])
        self.assertEqual([call.args for call in calls], [(1,), (1,)])

    def test_properties_and_attributes_left_alone(self):
        m = mock_factory.mock(MyObject)
        self.assertEqual(m.kind, 'greeter')
        self.assertEqual(m.mood, 'happy')

    def test_mocks_are_independent(self):
        first = mock_factory.mock(MyObject)
        second = mock_factory.mock(MyObject)
        first.greeting()
        self.assertEqual(len(get_state(first).log), 1)
        self.assertEqual(len(get_state(second).log), 0)
        self.assertNotEqual(first, second)
        self.assertEqual(first, first)

    def test_instance_template(self):
        template = InstanceMethods()
        m = mock_factory.mock(template)
        self.assertTrue(isinstance(m, InstanceMethods))
        self.assertEqual(m.greeting(), None)
        self.assertEqual(m.count, 3)
        self.assertEqual(template.greeting(), "hello")

    def test_abstract_template(self):
        m = mock_factory.mock(Interface)
        self.assertTrue(isinstance(m, Interface))
        self.assertEqual(m.run(), None)

    def test_name_and_repr(self):
        m = mock_factory.mock(MyObject, name='greeter')
        self.assertEqual(repr(m), '<mock: greeter>')
        self.assertEqual(repr(m.greeting), '<mock_method: greeter.greeting>')
        self.assertEqual(get_state(mock_factory.mock(MyObject)).name, 'obj')

    def test_default_name_from_settings(self):
        settings.override_value('MOCK', 'default_name', 'thing')
        try:
            self.assertEqual(repr(mock_factory.mock(MyObject)),
                             '<mock: thing>')
        finally:
            settings.reset_values()

    def test_debug_logs_calls(self):
        m = mock_factory.mock(MyObject, debug=True)
        with self.assertLogs(level=logging.INFO) as logs:
            m.farewell('hunter', loud=True)
        self.assertEqual(logs.records[0].getMessage(),
                         " * Mock call: obj.farewell('hunter', loud=True)")

    def test_none_template(self):
        self.assertRaises(error.MockCreationError, mock_factory.mock, None)

    def test_unsubclassable_template(self):
        self.assertRaises(error.MockCreationError, mock_factory.mock, bool)

    def test_not_a_mock(self):
        self.assertFalse(is_mock(MyObject))
        self.assertFalse(is_mock(object()))
        self.assertRaises(error.NotAMockError, get_state, object())


if __name__ == '__main__':
    unittest.main()
