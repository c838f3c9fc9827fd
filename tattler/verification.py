"""
Verification of the calls recorded by mocks.

verify(mock_obj).method(...) checks the invocation log right away and raises
VerificationError when the expectation is not met:

    verify(m).farewell('hunter', less_than(100))
    verify(m, times(2)).greeting.call(other_scope)
"""

import logging

from tattler import scope
from tattler.shared import error
from tattler.state import get_state


def _times(count):
    if count == 1:
        return '1 time'
    return '%d times' % count


class call_count(object):
    """How many matching invocations a verification accepts."""

    def __init__(self, minimum, maximum, description):
        if minimum < 0 or (maximum is not None and maximum < minimum):
            raise ValueError('Invalid call count range %s..%s'
                             % (minimum, maximum))
        self.minimum = minimum
        self.maximum = maximum
        self.description = description


    def is_satisfied_by(self, count):
        if count < self.minimum:
            return False
        return self.maximum is None or count <= self.maximum


    def __str__(self):
        return self.description


def times(count):
    return call_count(count, count, 'exactly %s' % _times(count))


def once():
    return times(1)


def never():
    return times(0)


def at_least(count):
    return call_count(count, None, 'at least %s' % _times(count))


def at_least_once():
    return at_least(1)


def at_most(count):
    return call_count(0, count, 'at most %s' % _times(count))


def verify(mock_obj, policy=None):
    """
    Return a proxy whose methods check the invocation log of mock_obj.

    Without a policy exactly one matching invocation is required.
    """
    state = get_state(mock_obj)
    if policy is None:
        policy = once()

    def check(pattern):
        matched = [call for call in state.log.for_symbol(pattern.symbol)
                   if pattern.matches_invocation(call)]
        if not policy.is_satisfied_by(len(matched)):
            logging.debug('Wanted %s but was invoked %s: %s', policy,
                          _times(len(matched)), pattern)
            raise error.VerificationError(
                'Wanted but not invoked: %s' % pattern,
                wanted=policy, invocation_count=len(matched))
        state.log.mark_verified(matched)
        logging.debug('Verified %s (%s)', pattern, _times(len(matched)))

    return scope.expectation_proxy(mock_obj, state, check)


def _dump_invocation(state, call):
    return scope.dump_function_call('%s.%s' % (state.name, call.symbol),
                                    call.args, call.dargs)


def verify_zero_interactions(*mock_objs):
    for mock_obj in mock_objs:
        state = get_state(mock_obj)
        calls = list(state.log)
        if calls:
            raise error.VerificationError(
                'No interactions wanted, but found: %s'
                % ', '.join(_dump_invocation(state, call) for call in calls))


def verify_no_more_interactions(*mock_objs):
    for mock_obj in mock_objs:
        state = get_state(mock_obj)
        calls = state.log.unverified()
        if calls:
            raise error.VerificationError(
                'No more interactions wanted, but found: %s'
                % ', '.join(_dump_invocation(state, call) for call in calls))
