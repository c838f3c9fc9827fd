#!/usr/bin/python

import unittest

from tattler import matchers, stubbing
from tattler.mock_factory import mock
from tattler.shared import error
from tattler.shared.settings import settings
from tattler.state import get_state


class MyObject(object):

    def greeting(self):
        return "hello"

    def farewell(self, *names):
        return "goodbye"


class StubTestCase(unittest.TestCase):

    def setUp(self):
        self.mock_obj = mock(MyObject)
        self.stub_scope = None
        self.stub_arguments = None

    def stub_function(self, this, *args):
        self.stub_scope = this
        self.stub_arguments = args
        return 'stub result'


class when_without_then_test(StubTestCase):

    def test_returns_none(self):
        stubbing.when(self.mock_obj).greeting()
        self.assertTrue(self.mock_obj.greeting() is None)

    def test_rule_is_registered(self):
        stubbing.when(self.mock_obj).greeting()
        rules = get_state(self.mock_obj).registry.rules_for('greeting')
        self.assertEqual(len(rules), 1)
        self.assertEqual(str(rules[0]), 'obj.greeting()')


class then_test(StubTestCase):

    def setUp(self):
        StubTestCase.setUp(self)
        stubbing.when(self.mock_obj).greeting().then(self.stub_function)

    def test_returns_stub_result(self):
        self.assertEqual(self.mock_obj.greeting(), 'stub result')

    def test_stub_function_invoked(self):
        self.mock_obj.greeting()
        self.assertNotEqual(self.stub_arguments, None)

    def test_mock_is_default_scope(self):
        self.mock_obj.greeting()
        self.assertTrue(self.stub_scope is self.mock_obj)

    def test_arguments_forwarded(self):
        self.mock_obj.greeting('hello', None, 5)
        self.assertEqual(self.stub_arguments, ('hello', None, 5))

    def test_call_with_mock_as_scope(self):
        self.mock_obj.greeting.call(self.mock_obj)
        self.assertTrue(self.stub_scope is self.mock_obj)

    def test_apply_with_mock_as_scope(self):
        self.mock_obj.greeting.apply(self.mock_obj, ['hello', 6])
        self.assertTrue(self.stub_scope is self.mock_obj)
        self.assertEqual(self.stub_arguments, ('hello', 6))

    def test_call_with_different_scope(self):
        self.assertTrue(self.mock_obj.greeting.call(object()) is None)
        self.assertTrue(self.stub_scope is None)

    def test_then_replaces_the_registered_rule(self):
        rules = get_state(self.mock_obj).registry.rules_for('greeting')
        self.assertEqual(len(rules), 1)

    def test_keyword_arguments_forwarded(self):
        received = {}

        def action(this, *args, **dargs):
            received.update(dargs)
            return args

        stubbing.when(self.mock_obj).farewell(loud=True).then(action)
        self.assertEqual(self.mock_obj.farewell(1, loud=True, name='x'), (1,))
        self.assertEqual(received, {'loud': True, 'name': 'x'})
        self.assertTrue(self.mock_obj.farewell(1, loud=False) is None)


class multiple_arguments_test(StubTestCase):

    def setUp(self):
        StubTestCase.setUp(self)
        stubbing.when(self.mock_obj).farewell(
            'foo', matchers.less_than(10),
            matchers.anything()).then(self.stub_function)

    def test_returns_stub_result(self):
        self.assertEqual(self.mock_obj.farewell('foo', 9, {}), 'stub result')

    def test_additional_arguments_ignored(self):
        result = self.mock_obj.farewell.apply(self.mock_obj,
                                              ['foo', 9, {}, 'something else'])
        self.assertEqual(result, 'stub result')

    def test_insufficient_arguments(self):
        self.assertTrue(self.mock_obj.farewell('foo', 9) is None)

    def test_arguments_do_not_match(self):
        self.assertTrue(self.mock_obj.farewell('foo', 11, 'bar') is None)

    def test_none_satisfies_anything(self):
        self.assertEqual(self.mock_obj.farewell('foo', 9, None),
                         'stub result')


class explicit_scope_test(StubTestCase):

    def test_stub_gets_explicit_scope(self):
        stubbing.when(self.mock_obj).greeting.call(
            matchers.anything()).then(self.stub_function)
        scope = object()
        self.mock_obj.greeting.call(scope, 1, 'foo')
        self.assertTrue(self.stub_scope is scope)
        self.assertEqual(self.stub_arguments, (1, 'foo'))

    def test_stub_for_literal_scope(self):
        scope = object()
        stubbing.when(self.mock_obj).greeting.apply(scope, []).then_return(1)
        self.assertEqual(self.mock_obj.greeting.call(scope), 1)
        self.assertTrue(self.mock_obj.greeting() is None)


class answers_test(StubTestCase):

    def test_then_return(self):
        stubbing.when(self.mock_obj).greeting().then_return('hi')
        self.assertEqual(self.mock_obj.greeting(), 'hi')
        self.assertEqual(self.mock_obj.greeting('extra'), 'hi')

    def test_then_raise(self):
        stubbing.when(self.mock_obj).farewell('x').then_raise(ValueError('x'))
        self.assertRaises(ValueError, self.mock_obj.farewell, 'x')
        self.assertTrue(self.mock_obj.farewell('y') is None)
        # the failing call is recorded all the same
        self.assertEqual(
            len(get_state(self.mock_obj).log.for_symbol('farewell')), 2)

    def test_reentrant_stub(self):
        stubbing.when(self.mock_obj).farewell().then(
            lambda this, *args: this.greeting())
        stubbing.when(self.mock_obj).greeting().then_return('hello')
        self.assertEqual(self.mock_obj.farewell(), 'hello')
        calls = list(get_state(self.mock_obj).log)
        self.assertEqual([call.symbol for call in calls],
                         ['farewell', 'greeting'])


class precedence_test(StubTestCase):

    def test_latest_rule_wins(self):
        stubbing.when(self.mock_obj).farewell(
            matchers.anything()).then_return('any')
        stubbing.when(self.mock_obj).farewell('foo').then_return('foo')
        self.assertEqual(self.mock_obj.farewell('foo'), 'foo')
        self.assertEqual(self.mock_obj.farewell('bar'), 'any')

    def test_override(self):
        stubbing.when(self.mock_obj).greeting().then_return('first')
        stubbing.when(self.mock_obj).greeting().then_return('second')
        self.assertEqual(self.mock_obj.greeting(), 'second')

    def test_earliest_rule_wins_when_configured(self):
        settings.override_value('STUBBING', 'precedence', 'earliest')
        try:
            mock_obj = mock(MyObject)
        finally:
            settings.reset_values()
        stubbing.when(mock_obj).greeting().then_return('first')
        stubbing.when(mock_obj).greeting().then_return('second')
        self.assertEqual(mock_obj.greeting(), 'first')

    def test_unknown_precedence(self):
        self.assertRaises(error.SettingsValueError,
                          stubbing.stub_registry, 'random')


class when_errors_test(StubTestCase):

    def test_not_a_mock(self):
        self.assertRaises(error.NotAMockError, stubbing.when, MyObject())

    def test_unknown_method(self):
        proxy = stubbing.when(self.mock_obj)
        self.assertRaises(error.UnknownMethodError, getattr, proxy, 'wave')


if __name__ == '__main__':
    unittest.main()
