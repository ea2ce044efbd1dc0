class IdGuardException(Exception):
    def __init__(self, msg, *args):
        super().__init__(msg.format(*args))


class RegistryError(IdGuardException):
    """The country table is misconfigured; raised while building a registry."""


class UnknownCountryError(IdGuardException, LookupError):
    """A country key was requested that is not registered (or not enabled)."""
