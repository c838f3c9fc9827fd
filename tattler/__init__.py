"""
tattler: mocks that record their calls, stubbing and verification.

    from tattler import mock, when, verify, less_than

    m = mock(Greeter)
    when(m).farewell('foo', less_than(10)).then_return('bye')
    m.farewell('foo', 9)
    verify(m).farewell('foo', 9)
"""

from tattler.matchers import (all_of, any_of, anything, equal_to,
                              greater_than, instance_of, is_string,
                              less_than, matches_regex, nil, not_, same_as)
from tattler.mock_factory import mock
from tattler.state import is_mock
from tattler.stubbing import when
from tattler.verification import (at_least, at_least_once, at_most, never,
                                  once, times, verify,
                                  verify_no_more_interactions,
                                  verify_zero_interactions)
