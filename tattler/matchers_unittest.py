#!/usr/bin/python

import unittest

from tattler import matchers


class equality_matcher_test(unittest.TestCase):

    def test_primitives(self):
        self.assertTrue(matchers.equal_to(67).matches(67))
        self.assertTrue(matchers.equal_to(67).matches(67.0))
        self.assertFalse(matchers.equal_to(67).matches(68))
        self.assertTrue(matchers.equal_to('hunter').matches('hunter'))
        self.assertFalse(matchers.equal_to('67').matches(67))

    def test_bool_is_not_a_number(self):
        self.assertFalse(matchers.equal_to(1).matches(True))
        self.assertTrue(matchers.equal_to(True).matches(True))

    def test_none_is_distinct(self):
        self.assertTrue(matchers.equal_to(None).matches(None))
        self.assertFalse(matchers.equal_to(None).matches(0))
        self.assertFalse(matchers.equal_to(None).matches(''))
        self.assertFalse(matchers.equal_to(0).matches(None))

    def test_sequences(self):
        self.assertTrue(matchers.equal_to(['hello', None, 5]).matches(
            ['hello', None, 5]))
        self.assertFalse(matchers.equal_to(['hello', None]).matches(
            ['hello', None, 5]))
        self.assertFalse(matchers.equal_to([1, 2]).matches((1, 2)))
        self.assertTrue(matchers.equal_to([[1], (2, 3)]).matches(
            [[1], (2, 3)]))

    def test_dicts(self):
        self.assertTrue(matchers.equal_to({'a': [1, {'b': 2}]}).matches(
            {'a': [1, {'b': 2}]}))
        self.assertFalse(matchers.equal_to({'a': 1}).matches({'a': 1,
                                                             'b': 2}))
        self.assertFalse(matchers.equal_to({'a': 1}).matches({'a': 2}))

    def test_nested_matcher(self):
        matcher = matchers.equal_to(['foo', matchers.less_than(10)])
        self.assertTrue(matcher.matches(['foo', 9]))
        self.assertFalse(matcher.matches(['foo', 10]))

    def test_identity(self):
        obj = object()
        self.assertTrue(matchers.equal_to(obj).matches(obj))
        self.assertFalse(matchers.equal_to(obj).matches(object()))

    def test_describe(self):
        self.assertEqual(matchers.equal_to('hunter').describe(),
                         'equal to "hunter"')
        self.assertEqual(matchers.equal_to(67).describe(), 'equal to 67')
        self.assertEqual(str(matchers.equal_to('say "hi"')),
                         '<equal to "say \\"hi\\"">')
        self.assertEqual(str(matchers.equal_to(None)), '<equal to None>')


class builtin_matchers_test(unittest.TestCase):

    def test_anything(self):
        self.assertTrue(matchers.anything().matches(None))
        self.assertTrue(matchers.anything().matches({}))
        self.assertEqual(str(matchers.anything()), '<anything>')
        self.assertTrue(matchers.anything() is matchers.anything())

    def test_less_than(self):
        self.assertTrue(matchers.less_than(100).matches(67))
        self.assertFalse(matchers.less_than(100).matches(100))
        self.assertFalse(matchers.less_than(100).matches('bar'))
        self.assertFalse(matchers.less_than(100).matches(None))
        self.assertEqual(str(matchers.less_than(100)), '<less than 100>')

    def test_greater_than(self):
        self.assertTrue(matchers.greater_than(1).matches(2))
        self.assertFalse(matchers.greater_than(1).matches(1))
        self.assertEqual(str(matchers.greater_than(1)), '<greater than 1>')

    def test_same_as(self):
        value = []
        self.assertTrue(matchers.same_as(value).matches(value))
        self.assertFalse(matchers.same_as(value).matches([]))
        self.assertTrue(matchers.same_as(None).matches(None))

    def test_instance_of(self):
        self.assertTrue(matchers.instance_of(int).matches(3))
        self.assertFalse(matchers.instance_of(int).matches('3'))
        self.assertEqual(str(matchers.instance_of(int)),
                         '<an instance of int>')

    def test_nil_and_not(self):
        self.assertTrue(matchers.nil().matches(None))
        self.assertFalse(matchers.nil().matches(0))
        self.assertTrue(matchers.not_(matchers.nil()).matches(0))
        self.assertFalse(matchers.not_(5).matches(5))
        self.assertEqual(str(matchers.not_(matchers.nil())), '<not None>')

    def test_any_and_all_of(self):
        matcher = matchers.any_of(1, matchers.greater_than(10))
        self.assertTrue(matcher.matches(1))
        self.assertTrue(matcher.matches(11))
        self.assertFalse(matcher.matches(5))
        self.assertEqual(str(matcher),
                         '<(<equal to 1> or <greater than 10>)>')
        matcher = matchers.all_of(matchers.greater_than(1),
                                  matchers.less_than(3))
        self.assertTrue(matcher.matches(2))
        self.assertFalse(matcher.matches(3))

    def test_strings(self):
        self.assertTrue(matchers.matches_regex('^hun').matches('hunter'))
        self.assertFalse(matchers.matches_regex('^hun').matches('thompson'))
        self.assertFalse(matchers.matches_regex('^1').matches(1))
        self.assertEqual(str(matchers.matches_regex('^hun')),
                         '<a string matching /^hun/>')
        self.assertTrue(matchers.is_string().matches(''))
        self.assertFalse(matchers.is_string().matches(b''))


class wrap_test(unittest.TestCase):

    def test_matchers_pass_through(self):
        matcher = matchers.less_than(3)
        self.assertTrue(matchers.wrap(matcher) is matcher)

    def test_values_become_equal_to(self):
        matcher = matchers.wrap('foo')
        self.assertTrue(isinstance(matcher, matchers.equality_matcher))
        self.assertTrue(matcher.matches('foo'))

    def test_classes_are_values(self):
        matcher = matchers.wrap(int)
        self.assertTrue(matcher.matches(int))
        self.assertFalse(matcher.matches(3))


if __name__ == '__main__':
    unittest.main()
