#!/usr/bin/python

import unittest

from tattler import invocation


class invocation_log_test(unittest.TestCase):

    def setUp(self):
        self.log = invocation.invocation_log()
        self.receiver = object()

    def test_append_records_call_exactly(self):
        call = self.log.append('greeting', self.receiver, ('hello', None, 5),
                               {'loud': True})
        self.assertEqual(call.symbol, 'greeting')
        self.assertEqual(call.args, ('hello', None, 5))
        self.assertEqual(call.dargs, {'loud': True})
        self.assertTrue(call.receiver is self.receiver)
        self.assertEqual(self.log.for_symbol('greeting'), [call])

    def test_recorded_keywords_are_read_only(self):
        dargs = {'loud': True}
        call = self.log.append('greeting', self.receiver, (), dargs)
        dargs['loud'] = False
        self.assertEqual(call.dargs['loud'], True)
        self.assertRaises(TypeError, call.dargs.__setitem__, 'loud', False)
        self.assertRaises(TypeError, call.dargs.__delitem__, 'loud')
        self.assertEqual(dict(call.dargs), {'loud': True})

    def test_empty_history(self):
        self.assertEqual(self.log.for_symbol('greeting'), [])
        self.assertEqual(len(self.log), 0)
        self.assertEqual(list(self.log), [])

    def test_sequence_is_increasing_across_logs(self):
        other_log = invocation.invocation_log()
        first = self.log.append('greeting', self.receiver, (), {})
        second = other_log.append('greeting', self.receiver, (), {})
        third = self.log.append('farewell', self.receiver, (), {})
        self.assertTrue(first.sequence < second.sequence < third.sequence)

    def test_iteration_is_in_call_order(self):
        first = self.log.append('greeting', self.receiver, (), {})
        second = self.log.append('farewell', self.receiver, (1,), {})
        third = self.log.append('greeting', self.receiver, (2,), {})
        self.assertEqual(list(self.log), [first, second, third])
        self.assertEqual(self.log.for_symbol('greeting'), [first, third])
        self.assertEqual(len(self.log), 3)

    def test_for_symbol_returns_a_copy(self):
        self.log.append('greeting', self.receiver, (), {})
        self.log.for_symbol('greeting').append('junk')
        self.assertEqual(len(self.log.for_symbol('greeting')), 1)

    def test_verified_tracking(self):
        first = self.log.append('greeting', self.receiver, (), {})
        second = self.log.append('farewell', self.receiver, (), {})
        self.assertEqual(self.log.unverified(), [first, second])
        self.log.mark_verified([first])
        self.assertTrue(self.log.is_verified(first))
        self.assertFalse(self.log.is_verified(second))
        self.assertEqual(self.log.unverified(), [second])


if __name__ == '__main__':
    unittest.main()
