"""Exceptions raised by geomvalue."""


class DecodeError(ValueError):
    """A float record could not be decoded from bytes or a stream."""
