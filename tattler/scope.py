"""
Receiver ("scope") handling shared by mocks, stubbing and verification.

A call may reach a mock method in three forms:

    mock_obj.greeting(1, 2)                 # receiver is mock_obj
    mock_obj.greeting.call(other, 1, 2)     # receiver is other
    mock_obj.greeting.apply(other, [1, 2])  # receiver is other

All of them are reduced to a (receiver, args, dargs) triple before anything
is recorded or compared.  The same three forms are offered by when() and
verify(), where the receiver given to call()/apply() becomes the scope
matcher of the expectation.
"""

from tattler import matchers
from tattler.shared import error


# receiver of an expectation that did not name one explicitly
DEFAULT_SCOPE = object()


class receiver_forms(object):
    """Mixin turning the three call forms into one _dispatch() call."""

    def _default_receiver(self):
        raise NotImplementedError


    def _dispatch(self, receiver, args, dargs):
        raise NotImplementedError


    def __call__(self, *args, **dargs):
        return self._dispatch(self._default_receiver(), args, dargs)


    def call(self, receiver, *args, **dargs):
        return self._dispatch(receiver, args, dargs)


    def apply(self, receiver, args=None, dargs=None):
        return self._dispatch(receiver, tuple(args or ()), dict(dargs or {}))


def scope_matcher(mock_obj, receiver=DEFAULT_SCOPE):
    """
    Return (matcher, explicit) for an expectation on mock_obj.

    Without an explicit receiver only calls made against the mock itself
    match.
    """
    if receiver is DEFAULT_SCOPE:
        return matchers.equal_to(mock_obj), False
    return matchers.wrap(receiver), True


class call_pattern(object):
    """
    The expected shape of a call: method, argument matchers and receiver.

    Matching is by prefix: every expected positional matcher has to be
    satisfied by the argument at the same position, surplus actual
    arguments are ignored and a call with fewer arguments than expected
    never matches.  Expected keyword arguments must all be present and
    match; other actual keywords are ignored.
    """

    def __init__(self, name, symbol, args, dargs, scope, explicit_scope):
        self.name = name
        self.symbol = symbol
        self.args = [matchers.wrap(arg) for arg in args]
        self.dargs = dict((key, matchers.wrap(value))
                          for key, value in dargs.items())
        self.scope = scope
        self.explicit_scope = explicit_scope


    def matches(self, receiver, args, dargs):
        if len(args) < len(self.args):
            return False

        for expected_arg, actual_arg in zip(self.args, args):
            if not expected_arg.matches(actual_arg):
                return False

        for key, expected_arg in self.dargs.items():
            if key not in dargs:
                return False
            if not expected_arg.matches(dargs[key]):
                return False

        return self.scope.matches(receiver)


    def matches_invocation(self, call):
        return (call.symbol == self.symbol and
                self.matches(call.receiver, call.args, call.dargs))


    def __str__(self):
        text = dump_function_call('%s.%s' % (self.name, self.symbol),
                                  self.args, self.dargs)
        if self.explicit_scope:
            text += ", 'this' being %s" % self.scope.describe()
        return text


class pattern_builder(receiver_forms):
    """Stands in for a mock method inside when(...) and verify(...)."""

    def __init__(self, mock_obj, name, symbol, on_pattern):
        self._mock = mock_obj
        self._name = name
        self.symbol = symbol
        self._on_pattern = on_pattern


    def _default_receiver(self):
        return DEFAULT_SCOPE


    def _dispatch(self, receiver, args, dargs):
        scope, explicit = scope_matcher(self._mock, receiver)
        pattern = call_pattern(self._name, self.symbol, args, dargs,
                               scope, explicit)
        return self._on_pattern(pattern)


class expectation_proxy(object):
    """
    Object returned by when() and verify(): looking up a method on it gives
    a pattern_builder for that method of the mock.
    """

    def __init__(self, mock_obj, state, on_pattern):
        self.__mock = mock_obj
        self.__state = state
        self.__on_pattern = on_pattern


    def __getattr__(self, symbol):
        if symbol.startswith('__') and symbol.endswith('__'):
            raise AttributeError(symbol)
        if symbol not in self.__state.symbols:
            raise error.UnknownMethodError(self.__state.name, symbol)
        return pattern_builder(self.__mock, self.__state.name, symbol,
                               self.__on_pattern)


def _arg_to_str(arg):
    if isinstance(arg, matchers.argument_matcher):
        return str(arg)
    return repr(arg)


def dump_function_call(symbol, args, dargs):
    arg_vec = []
    for arg in args:
        arg_vec.append(_arg_to_str(arg))
    for key, val in dargs.items():
        arg_vec.append("%s=%s" % (key, _arg_to_str(val)))
    return "%s(%s)" % (symbol, ', '.join(arg_vec))
