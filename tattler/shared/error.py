"""
Internal global error types
"""

# Add names you want to be imported by 'from errors import *' to this list.
# This must be list not a tuple as we modify it to include all of our
# the Exception classes we define below at the end of this file.
__all__ = []


class TattlerError(Exception):

    """The parent of all errors deliberately thrown within tattler."""
    pass


class VerificationError(TattlerError, AssertionError):

    """
    Indicates that the recorded invocations of a mock do not satisfy a
    verification.  The message is the full diagnostic, so assertion
    frameworks can report it as is.  wanted and invocation_count carry
    the call count policy and the number of matching calls found.
    """

    def __init__(self, message, wanted=None, invocation_count=None):
        TattlerError.__init__(self, message)
        self.wanted = wanted
        self.invocation_count = invocation_count


class MockError(TattlerError):

    """Indicates the mocking API was used incorrectly."""
    pass


class MockCreationError(MockError):

    """Indicates a template that can not be turned into a mock."""
    pass


class NotAMockError(MockError):

    """Indicates when() or verify() was given something that is no mock."""

    def __init__(self, obj):
        MockError.__init__(self, "Argument passed is not a mock: %r" % (obj,))
        self.obj = obj


class UnknownMethodError(MockError, AttributeError):

    """Indicates a stub or verification named a method the mock lacks."""

    def __init__(self, name, symbol):
        MockError.__init__(self, "Mock %s has no method %r" % (name, symbol))
        self.name = name
        self.symbol = symbol


class SettingsError(TattlerError):

    """Indicates a configuration value could not be found."""
    pass


class SettingsValueError(SettingsError):

    """Indicates a configuration value could not be converted."""
    pass


# This MUST remain at the end of the file.
# Limit 'from error import *' to only import the exception instances.
for _name, _thing in list(locals().items()):
    try:
        if issubclass(_thing, Exception):
            __all__.append(_name)
    except TypeError:
        pass  # _thing not a class
__all__ = tuple(__all__)
