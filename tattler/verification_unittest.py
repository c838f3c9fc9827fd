#!/usr/bin/python

import unittest

from tattler import matchers, verification
from tattler.mock_factory import mock
from tattler.shared import error
from tattler.stubbing import when


class MyObject(object):

    def greeting(self):
        return "hello"

    def farewell(self, *names):
        return "goodbye"


class Scope(object):

    def __str__(self):
        return '[scope]'


class VerifyTestCase(unittest.TestCase):

    def assertVerificationFails(self, message, func, *args, **dargs):
        try:
            func(*args, **dargs)
        except error.VerificationError as err:
            self.assertEqual(str(err), message)
        else:
            self.fail('VerificationError not raised')


class invoked_once_without_arguments_test(VerifyTestCase):

    def setUp(self):
        self.mock_obj = mock(MyObject)
        self.result = self.mock_obj.greeting()

    def test_returns_none(self):
        self.assertTrue(self.result is None)

    def test_verify_invoked(self):
        verification.verify(self.mock_obj).greeting()

    def test_verify_with_scope(self):
        verification.verify(self.mock_obj).greeting.call(self.mock_obj)

    def test_verify_with_scope_matcher(self):
        verification.verify(self.mock_obj).greeting.apply(
            matchers.anything(), [])

    def test_verify_with_different_scope(self):
        test_scope = Scope()
        self.assertVerificationFails(
            "Wanted but not invoked: obj.greeting(), 'this' being equal to "
            "%s" % test_scope,
            verification.verify(self.mock_obj).greeting.call, test_scope)

    def test_verification_error_is_an_assertion(self):
        self.assertRaises(AssertionError,
                          verification.verify(self.mock_obj).farewell)

    def test_verify_is_repeatable(self):
        for _ in range(3):
            verification.verify(self.mock_obj).greeting()
            self.assertRaises(
                error.VerificationError,
                verification.verify(self.mock_obj).greeting.call, Scope())


class invoked_with_multiple_arguments_test(VerifyTestCase):

    def setUp(self):
        self.mock_obj = mock(MyObject)
        self.mock_obj.farewell('hunter', 'thompson', 67)

    def test_verify_invoked(self):
        verification.verify(self.mock_obj).farewell()

    def test_verify_some_arguments(self):
        verification.verify(self.mock_obj).farewell('hunter', 'thompson')

    def test_verify_all_arguments(self):
        verification.verify(self.mock_obj).farewell('hunter', 'thompson', 67)

    def test_verify_using_matchers(self):
        verification.verify(self.mock_obj).farewell(
            'hunter', 'thompson', matchers.less_than(100))

    def test_additional_arguments(self):
        self.assertVerificationFails(
            'Wanted but not invoked: obj.farewell(<equal to "hunter">, '
            '<equal to "thompson">, <equal to 67>, <equal to "batcountry">)',
            verification.verify(self.mock_obj).farewell,
            'hunter', 'thompson', 67, 'batcountry')

    def test_different_arguments(self):
        self.assertVerificationFails(
            'Wanted but not invoked: obj.farewell(<equal to "hunter">, '
            '<equal to "thompson">, <equal to 68>)',
            verification.verify(self.mock_obj).farewell,
            'hunter', 'thompson', 68)

    def test_matcher_description(self):
        self.assertVerificationFails(
            'Wanted but not invoked: obj.farewell(<less than 10>)',
            verification.verify(self.mock_obj).farewell,
            matchers.less_than(10))

    def test_keyword_description(self):
        self.assertVerificationFails(
            'Wanted but not invoked: obj.farewell(loud=<anything>)',
            verification.verify(self.mock_obj).farewell,
            loud=matchers.anything())


class invoked_with_different_scope_test(VerifyTestCase):

    def setUp(self):
        self.mock_obj = mock(MyObject)
        self.test_scope = Scope()
        self.mock_obj.greeting.call(self.test_scope)

    def test_verify_without_explicit_scope(self):
        self.assertVerificationFails(
            'Wanted but not invoked: obj.greeting()',
            verification.verify(self.mock_obj).greeting)

    def test_verify_with_explicit_scope(self):
        verification.verify(self.mock_obj).greeting.apply(self.test_scope, [])

    def test_verify_with_other_scope(self):
        self.assertRaises(error.VerificationError,
                          verification.verify(self.mock_obj).greeting.apply,
                          Scope(), [])


class named_mock_test(VerifyTestCase):

    def test_name_in_message(self):
        mock_obj = mock(MyObject, name='greeter')
        self.assertVerificationFails(
            'Wanted but not invoked: greeter.greeting()',
            verification.verify(mock_obj).greeting)

    def test_unstubbed_and_stubbed_calls_are_both_recorded(self):
        mock_obj = mock(MyObject)
        when(mock_obj).greeting('a').then_return(1)
        mock_obj.greeting('a')
        mock_obj.greeting('b')
        verification.verify(mock_obj, verification.times(2)).greeting()


class call_count_test(VerifyTestCase):

    def setUp(self):
        self.mock_obj = mock(MyObject)
        self.mock_obj.greeting()
        self.mock_obj.greeting()

    def assertCountFails(self, wanted, invocation_count, func):
        try:
            func()
        except error.VerificationError as err:
            self.assertEqual(str(err),
                             'Wanted but not invoked: obj.greeting()')
            self.assertEqual(str(err.wanted), wanted)
            self.assertEqual(err.invocation_count, invocation_count)
        else:
            self.fail('VerificationError not raised')

    def test_default_wants_exactly_one_call(self):
        self.assertCountFails(
            'exactly 1 time', 2,
            verification.verify(self.mock_obj).greeting)
        verification.verify(self.mock_obj, verification.times(2)).greeting()

    def test_times(self):
        verification.verify(self.mock_obj, verification.times(2)).greeting()
        self.assertCountFails(
            'exactly 1 time', 2,
            verification.verify(self.mock_obj, verification.once()).greeting)

    def test_times_with_fewer_calls(self):
        mock_obj = mock(MyObject)
        mock_obj.greeting()
        self.assertVerificationFails(
            'Wanted but not invoked: obj.greeting()',
            verification.verify(mock_obj, verification.times(2)).greeting)

    def test_times_not_invoked(self):
        self.assertVerificationFails(
            'Wanted but not invoked: obj.farewell()',
            verification.verify(self.mock_obj,
                                verification.times(2)).farewell)

    def test_never(self):
        verification.verify(self.mock_obj, verification.never()).farewell()
        self.assertCountFails(
            'exactly 0 times', 2,
            verification.verify(self.mock_obj, verification.never()).greeting)

    def test_at_least_and_at_most(self):
        verification.verify(self.mock_obj, verification.at_least(2)).greeting()
        verification.verify(self.mock_obj, verification.at_most(2)).greeting()
        verification.verify(self.mock_obj,
                            verification.at_least_once()).greeting()
        self.assertCountFails(
            'at least 3 times', 2,
            verification.verify(self.mock_obj,
                                verification.at_least(3)).greeting)
        self.assertCountFails(
            'at most 1 time', 2,
            verification.verify(self.mock_obj,
                                verification.at_most(1)).greeting)

    def test_invalid_count(self):
        self.assertRaises(ValueError, verification.times, -1)


class interactions_test(VerifyTestCase):

    def setUp(self):
        self.mock_obj = mock(MyObject)
        self.other = mock(MyObject, name='other')

    def test_zero_interactions(self):
        verification.verify_zero_interactions(self.mock_obj, self.other)
        self.mock_obj.farewell('hunter', 67)
        self.assertVerificationFails(
            "No interactions wanted, but found: obj.farewell('hunter', 67)",
            verification.verify_zero_interactions, self.other, self.mock_obj)

    def test_no_more_interactions(self):
        self.mock_obj.greeting()
        self.mock_obj.farewell('hunter')
        self.mock_obj.greeting(loud=True)
        verification.verify(self.mock_obj, verification.times(2)).greeting()
        self.assertVerificationFails(
            "No more interactions wanted, but found: obj.farewell('hunter')",
            verification.verify_no_more_interactions, self.mock_obj)
        verification.verify(self.mock_obj).farewell(matchers.is_string())
        verification.verify_no_more_interactions(self.mock_obj, self.other)

    def test_failed_verification_marks_nothing(self):
        self.mock_obj.greeting()
        self.assertRaises(error.VerificationError,
                          verification.verify(self.mock_obj,
                                              verification.times(2)).greeting)
        self.assertRaises(error.VerificationError,
                          verification.verify_no_more_interactions,
                          self.mock_obj)

    def test_not_a_mock(self):
        self.assertRaises(error.NotAMockError,
                          verification.verify_zero_interactions, MyObject())
        self.assertRaises(error.NotAMockError, verification.verify, None)


if __name__ == '__main__':
    unittest.main()
