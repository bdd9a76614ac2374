"""Dispatch exceptions — raised only for malformed input or misuse, never for
business outcomes such as "nobody is eligible"."""


class DispatchError(Exception):
    pass


class InvalidJobError(DispatchError, ValueError):
    """The job cannot be dispatched at all (e.g. no usable coordinates)."""


class OverrideError(DispatchError, ValueError):
    """A dispatcher override names a technician that was not recommended."""
