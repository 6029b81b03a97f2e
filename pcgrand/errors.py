"""Exceptions raised by the generators and the state codec."""


class InvalidEncoding(ValueError):
    """A serialized generator record is malformed (wrong size or magic tag)."""
