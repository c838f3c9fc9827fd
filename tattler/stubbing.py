import logging

from tattler import scope
from tattler.shared import error
from tattler.state import get_state


PRECEDENCES = ('latest', 'earliest')


def _return_none(receiver, *args, **dargs):
    return None


class stub_rule(object):
    """
    A call_pattern plus the action run for calls matching it.  The action
    gets the receiver of the call followed by the call's own arguments.
    """

    def __init__(self, pattern, action=None):
        self.pattern = pattern
        self.action = action or _return_none


    @property
    def symbol(self):
        return self.pattern.symbol


    def matches(self, receiver, args, dargs):
        return self.pattern.matches(receiver, args, dargs)


    def answer(self, receiver, args, dargs):
        return self.action(receiver, *args, **dargs)


    def __str__(self):
        return str(self.pattern)


class stub_registry(object):
    def __init__(self, precedence='latest'):
        if precedence not in PRECEDENCES:
            raise error.SettingsValueError(
                "Unknown stub precedence %r, expected one of %s"
                % (precedence, ', '.join(PRECEDENCES)))
        self.precedence = precedence
        self._rules = {}


    def add(self, rule):
        self._rules.setdefault(rule.symbol, []).append(rule)


    def replace(self, old_rule, new_rule):
        rules = self._rules[old_rule.symbol]
        rules[rules.index(old_rule)] = new_rule


    def rules_for(self, symbol):
        return list(self._rules.get(symbol, ()))


    def resolve(self, symbol, receiver, args, dargs):
        """Return the stub_rule answering this call, or None."""
        rules = self._rules.get(symbol, [])
        if self.precedence == 'latest':
            rules = reversed(rules)
        for rule in rules:
            if rule.matches(receiver, args, dargs):
                return rule
        return None


class ongoing_stubbing(object):
    """
    Returned by when(mock).method(...).  The rule is already registered
    (answering None); then*() replaces it with one answering differently.
    """

    def __init__(self, registry, rule):
        self._registry = registry
        self._rule = rule


    def then(self, action):
        return self._answer_with(action)


    def then_return(self, value):
        def _return_value(receiver, *args, **dargs):
            return value
        return self._answer_with(_return_value)


    def then_raise(self, exc):
        def _raise_error(receiver, *args, **dargs):
            raise exc
        return self._answer_with(_raise_error)


    def _answer_with(self, action):
        rule = stub_rule(self._rule.pattern, action)
        self._registry.replace(self._rule, rule)
        self._rule = rule
        return self


def when(mock_obj):
    """
    Start stubbing a method of mock_obj:

        when(m).farewell('foo', less_than(10)).then(action)
        when(m).greeting.call(anything()).then_return('hi')
    """
    state = get_state(mock_obj)

    def register(pattern):
        rule = stub_rule(pattern)
        state.registry.add(rule)
        logging.debug('Stubbed %s', pattern)
        return ongoing_stubbing(state.registry, rule)

    return scope.expectation_proxy(mock_obj, state, register)
