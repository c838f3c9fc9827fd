import collections
import itertools
import types


# call order is global so invocations of different mocks can be compared
_sequence = itertools.count(1)


invocation = collections.namedtuple('invocation',
                                    'symbol args dargs receiver sequence')


class invocation_log(object):
    """
    Ordered history of the calls made against one mock.

    Invocations are kept per method name in call order.  Verification marks
    invocations as verified by sequence number; the invocation records
    themselves never change.
    """

    def __init__(self):
        self._by_symbol = collections.OrderedDict()
        self._verified = set()


    def append(self, symbol, receiver, args, dargs):
        call = invocation(symbol, tuple(args),
                          types.MappingProxyType(dict(dargs)), receiver,
                          next(_sequence))
        self._by_symbol.setdefault(symbol, []).append(call)
        return call


    def for_symbol(self, symbol):
        return list(self._by_symbol.get(symbol, ()))


    def __iter__(self):
        calls = itertools.chain.from_iterable(self._by_symbol.values())
        return iter(sorted(calls, key=lambda call: call.sequence))


    def __len__(self):
        return sum(len(calls) for calls in self._by_symbol.values())


    def mark_verified(self, calls):
        self._verified.update(call.sequence for call in calls)


    def is_verified(self, call):
        return call.sequence in self._verified


    def unverified(self):
        return [call for call in self if not self.is_verified(call)]
