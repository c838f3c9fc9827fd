from tattler.shared import error


STATE_ATTRIBUTE = '_tattler_mock_state'


class mock_state(object):
    """Everything a mock owns: its label, methods, history and stubs."""

    def __init__(self, name, symbols, log, registry, debug=False):
        self.name = name
        self.symbols = frozenset(symbols)
        self.log = log
        self.registry = registry
        self.debug = debug


def get_state(obj):
    try:
        state = object.__getattribute__(obj, STATE_ATTRIBUTE)
    except AttributeError:
        raise error.NotAMockError(obj)
    if not isinstance(state, mock_state):
        raise error.NotAMockError(obj)
    return state


def is_mock(obj):
    try:
        get_state(obj)
    except error.NotAMockError:
        return False
    return True
