"""Errors raised while declaring network components. These describe mistakes in the program's configuration, so they
are raised as soon as the bad call is made and before anything is declared."""


class NetkitError(Exception):
    """Base class for all errors raised by netkit."""


class InvalidArgumentError(NetkitError, ValueError):
    """An argument was given a value the component cannot use."""


class PreconditionViolationError(NetkitError, RuntimeError):
    """The component is not in a state which allows the requested declaration."""
