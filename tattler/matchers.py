"""
Argument matchers used by stubbing and verification.

A matcher is anything exposing matches(value) and describe().  Plain values
given where a matcher is expected are wrapped in an equal_to matcher by
wrap(), so the rest of tattler only ever deals with matchers.
"""

import numbers
import re


class argument_matcher(object):
    def matches(self, value):
        raise NotImplementedError


    def describe(self):
        raise NotImplementedError


    def __str__(self):
        return '<%s>' % self.describe()


    def __repr__(self):
        return str(self)


class equality_matcher(argument_matcher):
    def __init__(self, value):
        self.value = value


    @staticmethod
    def _types_match(arg1, arg2):
        if isinstance(arg1, str) and isinstance(arg2, str):
            return True
        if _is_number(arg1) and _is_number(arg2):
            return True
        return type(arg1) == type(arg2)


    @classmethod
    def _compare(cls, actual_arg, expected_arg):
        if isinstance(expected_arg, argument_matcher):
            return expected_arg.matches(actual_arg)
        if actual_arg is expected_arg:
            return True
        if not cls._types_match(expected_arg, actual_arg):
            return False

        if isinstance(expected_arg, (list, tuple)):
            # recurse on lists/tuples
            if len(actual_arg) != len(expected_arg):
                return False
            for actual_item, expected_item in zip(actual_arg, expected_arg):
                if not cls._compare(actual_item, expected_item):
                    return False
        elif isinstance(expected_arg, dict):
            # recurse on dicts
            if set(actual_arg) != set(expected_arg):
                return False
            for key, value in actual_arg.items():
                if not cls._compare(value, expected_arg[key]):
                    return False
        elif actual_arg != expected_arg:
            return False

        return True


    def matches(self, value):
        return self._compare(value, self.value)


    def describe(self):
        return 'equal to %s' % _literal(self.value)


class anything_matcher(argument_matcher):
    def matches(self, value):
        return True


    def describe(self):
        return 'anything'


class less_than_matcher(argument_matcher):
    def __init__(self, bound):
        self.bound = bound


    def matches(self, value):
        try:
            return value < self.bound
        except TypeError:
            return False


    def describe(self):
        return 'less than %s' % _literal(self.bound)


class greater_than_matcher(argument_matcher):
    def __init__(self, bound):
        self.bound = bound


    def matches(self, value):
        try:
            return value > self.bound
        except TypeError:
            return False


    def describe(self):
        return 'greater than %s' % _literal(self.bound)


class same_as_matcher(argument_matcher):
    def __init__(self, value):
        self.value = value


    def matches(self, value):
        return value is self.value


    def describe(self):
        return 'same as %s' % _literal(self.value)


class instance_of_matcher(argument_matcher):
    def __init__(self, cls):
        self.cls = cls


    def matches(self, value):
        return isinstance(value, self.cls)


    def describe(self):
        return 'an instance of %s' % getattr(self.cls, '__name__', self.cls)


class nil_matcher(argument_matcher):
    def matches(self, value):
        return value is None


    def describe(self):
        return 'None'


class not_matcher(argument_matcher):
    def __init__(self, matcher):
        self.matcher = matcher


    def matches(self, value):
        return not self.matcher.matches(value)


    def describe(self):
        return 'not %s' % self.matcher.describe()


class any_of_matcher(argument_matcher):
    def __init__(self, matchers):
        self.matchers = matchers


    def matches(self, value):
        return any(matcher.matches(value) for matcher in self.matchers)


    def describe(self):
        return '(%s)' % ' or '.join(str(m) for m in self.matchers)


class all_of_matcher(argument_matcher):
    def __init__(self, matchers):
        self.matchers = matchers


    def matches(self, value):
        return all(matcher.matches(value) for matcher in self.matchers)


    def describe(self):
        return '(%s)' % ' and '.join(str(m) for m in self.matchers)


class regex_matcher(argument_matcher):
    def __init__(self, pattern, flags=0):
        self.regex = re.compile(pattern, flags)


    def matches(self, value):
        if not isinstance(value, str):
            return False
        return self.regex.search(value) is not None


    def describe(self):
        return 'a string matching /%s/' % self.regex.pattern


class is_string_matcher(argument_matcher):
    def matches(self, value):
        return isinstance(value, str)


    def describe(self):
        return 'a string'


def _is_number(value):
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def _literal(value):
    if isinstance(value, str):
        return '"%s"' % value.replace('\\', '\\\\').replace('"', '\\"')
    return str(value)


def wrap(value):
    """Return value itself if it is a matcher, else an equal_to matcher."""
    if isinstance(value, argument_matcher):
        return value
    return equality_matcher(value)


# stateless matchers are shared by everybody
_ANYTHING = anything_matcher()
_NIL = nil_matcher()
_IS_STRING = is_string_matcher()


def anything():
    return _ANYTHING


def nil():
    return _NIL


def is_string():
    return _IS_STRING


def equal_to(value):
    return equality_matcher(value)


def less_than(bound):
    return less_than_matcher(bound)


def greater_than(bound):
    return greater_than_matcher(bound)


def same_as(value):
    return same_as_matcher(value)


def instance_of(cls):
    return instance_of_matcher(cls)


def not_(matcher_or_value):
    return not_matcher(wrap(matcher_or_value))


def any_of(*matchers_or_values):
    return any_of_matcher([wrap(m) for m in matchers_or_values])


def all_of(*matchers_or_values):
    return all_of_matcher([wrap(m) for m in matchers_or_values])


def matches_regex(pattern, flags=0):
    return regex_matcher(pattern, flags)
