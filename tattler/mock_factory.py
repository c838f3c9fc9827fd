"""
Mock creation.

mock(template) builds an instance of a fresh subclass of the template's
class (so isinstance() checks keep working) without running its
initializer, and replaces every method with a mock_method that records the
call and answers with the matching stub, if any.
"""

import logging

from tattler import scope
from tattler.invocation import invocation_log
from tattler.shared import error
from tattler.shared.settings import settings
from tattler.state import STATE_ATTRIBUTE, get_state, mock_state
from tattler.stubbing import stub_registry


class mock_method(scope.receiver_forms):
    def __init__(self, owner, symbol, state):
        self._owner = owner
        self._state = state
        self.symbol = symbol
        self.__name__ = symbol


    def _default_receiver(self):
        return self._owner


    def _dispatch(self, receiver, args, dargs):
        call = self._state.log.append(self.symbol, receiver, args, dargs)
        if self._state.debug:
            level = logging.INFO
        else:
            level = logging.DEBUG
        if logging.getLogger().isEnabledFor(level):
            logging.log(level, ' * Mock call: %s',
                        scope.dump_function_call(
                            '%s.%s' % (self._state.name, self.symbol),
                            call.args, call.dargs))

        rule = self._state.registry.resolve(self.symbol, receiver,
                                            call.args, call.dargs)
        if rule is None:
            return None
        return rule.answer(receiver, call.args, call.dargs)


    def __repr__(self):
        return '<mock_method: %s.%s>' % (self._state.name, self.symbol)


def _no_init(self, *args, **dargs):
    pass


def _mock_repr(self):
    return '<mock: %s>' % get_state(self).name


def _no_del(self):
    pass


def _create_mock_class(cls):
    namespace = {
        '__init__': _no_init,
        '__repr__': _mock_repr,
        '__str__': _mock_repr,
        # mocks are only ever equal to themselves
        '__eq__': object.__eq__,
        '__ne__': object.__ne__,
        '__hash__': object.__hash__,
        '__module__': cls.__module__,
        '__qualname__': getattr(cls, '__qualname__', cls.__name__),
    }
    if hasattr(cls, '__del__'):
        namespace['__del__'] = _no_del

    try:
        mock_cls = type(cls)(cls.__name__, (cls,), namespace)
    except TypeError as err:
        raise error.MockCreationError('Can not mock %r: %s' % (cls, err))

    if getattr(mock_cls, '__abstractmethods__', None):
        mock_cls.__abstractmethods__ = frozenset()
    return mock_cls


def _allocate(mock_cls):
    try:
        if mock_cls.__new__ is object.__new__:
            return object.__new__(mock_cls)
        return mock_cls.__new__(mock_cls)
    except TypeError as err:
        raise error.MockCreationError('Can not mock %r: %s'
                                      % (mock_cls.__bases__[0], err))


def _method_symbols(template, cls):
    symbols = []
    for symbol in dir(template):
        if symbol.startswith('__') and symbol.endswith('__'):
            continue
        if isinstance(getattr(cls, symbol, None), property):
            continue
        try:
            orig_symbol = getattr(template, symbol)
        except AttributeError:
            continue
        if callable(orig_symbol):
            symbols.append(symbol)
    return symbols


def mock(template, name=None, debug=None):
    """
    Create a mock of template, a class or an instance.

    Every callable attribute of template (dunder names and properties
    excepted) is replaced by a mock_method on the new object.

    :param name: Label of the mock in diagnostics, [MOCK] default_name by
            default.
    :param debug: Log every call at INFO rather than DEBUG, [MOCK] debug by
            default.
    """
    if template is None:
        raise error.MockCreationError('Can not mock None')
    if isinstance(template, type):
        cls = template
    else:
        cls = type(template)

    if name is None:
        name = settings.get_value('MOCK', 'default_name', default='obj')
    if debug is None:
        debug = settings.get_value('MOCK', 'debug', type=bool, default=False)
    precedence = settings.get_value('STUBBING', 'precedence',
                                    default='latest')

    obj = _allocate(_create_mock_class(cls))
    symbols = _method_symbols(template, cls)
    state = mock_state(name, symbols, invocation_log(),
                       stub_registry(precedence), debug)
    object.__setattr__(obj, STATE_ATTRIBUTE, state)
    for symbol in symbols:
        object.__setattr__(obj, symbol, mock_method(obj, symbol, state))

    if not isinstance(template, type):
        # plain values set up by the template's own initializer
        for symbol, value in getattr(template, '__dict__', {}).items():
            if symbol.startswith('_') or callable(value):
                continue
            object.__setattr__(obj, symbol, value)

    logging.debug('Created mock %s of %s with methods: %s', name,
                  cls.__name__, ', '.join(symbols))
    return obj
