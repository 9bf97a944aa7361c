# parser/errors.py


class MsbtError(ValueError):
    """Base class for everything the MSBT decoder raises."""


class BadMagicError(MsbtError):
    pass


class UnknownByteOrderError(MsbtError):
    pass


class OutOfBoundsError(MsbtError):
    """A read would run past the end of the buffer."""


class UnknownSectionTagError(MsbtError):
    pass


class AttributeCountMismatchError(MsbtError):
    """ATR1 declares a different message count than LBL1 holds labels."""


class UninitializedByteOrderError(MsbtError, RuntimeError):
    """A multi-byte read happened before the header set the byte order.

    This is a bug in the caller, not a problem with the input.
    """
