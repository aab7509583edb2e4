class BchaddrError(Exception):
    pass


class InvalidAddress(BchaddrError, ValueError):
    def __init__(self, message: str = "Received an invalid Bitcoin Cash address as input.") -> None:
        super().__init__(message)


class UnsupportedEncoding(BchaddrError):
    """Requested encoding has no version byte or prefix for the network."""


class Base58Error(BchaddrError, ValueError):
    pass


class CashaddrError(BchaddrError, ValueError):
    pass


__all__ = [
    "BchaddrError",
    "InvalidAddress",
    "UnsupportedEncoding",
    "Base58Error",
    "CashaddrError",
]
