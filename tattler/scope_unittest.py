#!/usr/bin/python

import unittest

from tattler import matchers, scope
from tattler.invocation import invocation_log
from tattler.shared import error
from tattler.state import mock_state


class recording_forms(scope.receiver_forms):

    def __init__(self):
        self.dispatched = []

    def _default_receiver(self):
        return 'default'

    def _dispatch(self, receiver, args, dargs):
        self.dispatched.append((receiver, args, dargs))
        return len(self.dispatched)


class receiver_forms_test(unittest.TestCase):

    def setUp(self):
        self.forms = recording_forms()

    def test_direct_call(self):
        self.forms('hello', None, key=1)
        self.assertEqual(self.forms.dispatched,
                         [('default', ('hello', None), {'key': 1})])

    def test_call_and_apply_normalize_alike(self):
        self.forms.call('other', 'hello', 6)
        self.forms.apply('other', ['hello', 6])
        self.assertEqual(self.forms.dispatched[0], self.forms.dispatched[1])
        self.assertEqual(self.forms.dispatched[0],
                         ('other', ('hello', 6), {}))

    def test_apply_without_arguments(self):
        self.forms.apply('other')
        self.forms.apply('other', [], {'key': 2})
        self.assertEqual(self.forms.dispatched,
                         [('other', (), {}), ('other', (), {'key': 2})])


class call_pattern_test(unittest.TestCase):

    def setUp(self):
        self.receiver = object()
        self.scope, _ = scope.scope_matcher(self.receiver)

    def _pattern(self, *args, **dargs):
        return scope.call_pattern('obj', 'farewell', args, dargs, self.scope,
                                  False)

    def test_prefix_matching(self):
        pattern = self._pattern('hunter', 'thompson')
        self.assertTrue(pattern.matches(self.receiver,
                                        ('hunter', 'thompson'), {}))
        self.assertTrue(pattern.matches(self.receiver,
                                        ('hunter', 'thompson', 67), {}))
        self.assertFalse(pattern.matches(self.receiver,
                                         ('hunter', 'wolfe', 67), {}))

    def test_insufficient_arguments_never_match(self):
        pattern = self._pattern('foo', matchers.anything())
        self.assertFalse(pattern.matches(self.receiver, ('foo',), {}))
        pattern = self._pattern(matchers.anything())
        self.assertFalse(pattern.matches(self.receiver, (), {}))

    def test_no_expected_arguments_match_anything(self):
        pattern = self._pattern()
        self.assertTrue(pattern.matches(self.receiver, (), {}))
        self.assertTrue(pattern.matches(self.receiver, (1, 2), {'a': 3}))

    def test_keyword_arguments(self):
        pattern = self._pattern(loud=True)
        self.assertTrue(pattern.matches(self.receiver, (), {'loud': True}))
        self.assertTrue(pattern.matches(self.receiver, (),
                                        {'loud': True, 'name': 'x'}))
        self.assertFalse(pattern.matches(self.receiver, (), {'loud': False}))
        self.assertFalse(pattern.matches(self.receiver, (True,), {}))

    def test_default_scope_needs_the_mock(self):
        pattern = self._pattern()
        self.assertFalse(pattern.matches(object(), (), {}))

    def test_explicit_scope(self):
        scope_matcher, explicit = scope.scope_matcher(self.receiver,
                                                      matchers.anything())
        self.assertTrue(explicit)
        pattern = scope.call_pattern('obj', 'greeting', (), {},
                                     scope_matcher, explicit)
        self.assertTrue(pattern.matches(object(), (), {}))

    def test_str(self):
        pattern = self._pattern('hunter', 67, matchers.less_than(100),
                                loud=True)
        self.assertEqual(str(pattern),
                         'obj.farewell(<equal to "hunter">, <equal to 67>, '
                         '<less than 100>, loud=<equal to True>)')

    def test_str_with_explicit_scope(self):
        pattern = scope.call_pattern('obj', 'greeting', (), {},
                                     matchers.wrap('scope'), True)
        self.assertEqual(str(pattern),
                         'obj.greeting(), \'this\' being equal to "scope"')

    def test_matches_invocation_checks_symbol(self):
        call = self._invocation('greeting')
        self.assertFalse(self._pattern().matches_invocation(call))
        call = self._invocation('farewell')
        self.assertTrue(self._pattern().matches_invocation(call))

    def _invocation(self, symbol):
        return invocation_log().append(symbol, self.receiver, (), {})


class expectation_proxy_test(unittest.TestCase):

    def setUp(self):
        self.mock_obj = object()
        self.patterns = []
        state = mock_state('obj', ['greeting'], None, None)
        self.proxy = scope.expectation_proxy(self.mock_obj, state,
                                             self.patterns.append)

    def test_known_method(self):
        self.proxy.greeting.call(self.mock_obj, 1)
        self.assertEqual(len(self.patterns), 1)
        pattern = self.patterns[0]
        self.assertEqual(pattern.symbol, 'greeting')
        self.assertTrue(pattern.explicit_scope)
        self.assertTrue(pattern.matches(self.mock_obj, (1,), {}))

    def test_unknown_method(self):
        self.assertRaises(error.UnknownMethodError,
                          getattr, self.proxy, 'farewell')
        self.assertRaises(AttributeError, getattr, self.proxy, 'farewell')

    def test_dunder_lookup(self):
        self.assertFalse(hasattr(self.proxy, '__deepcopy__'))


class dump_function_call_test(unittest.TestCase):

    def test_plain_values_use_repr(self):
        self.assertEqual(scope.dump_function_call('obj.f', ('a', 1), {}),
                         "obj.f('a', 1)")
        self.assertEqual(scope.dump_function_call('obj.f', (), {'x': None}),
                         "obj.f(x=None)")


if __name__ == '__main__':
    unittest.main()
