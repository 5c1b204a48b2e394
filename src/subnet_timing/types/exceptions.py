"""Exception hierarchy for the timing package."""

from __future__ import annotations


class TimingError(Exception):
    """
    Base exception for all timing-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class DigestUnavailableError(TimingError):
    """
    Raised when a digest algorithm cannot be provided.

    Identifiers and selectors cannot be computed without one, so this is an
    initialization failure and is never retried.

    Attributes:
        name: The digest name that was requested.
        supported: The digest names that are available.
    """

    def __init__(self, name: str, supported: tuple[str, ...]) -> None:
        self.name = name
        self.supported = supported
        super().__init__(f"Digest '{name}' is unavailable (supported: {list(supported)})")


class SubnetOutOfRangeError(TimingError):
    """
    Raised when a subnet id falls outside [0, max_subnets).

    Only raised by calculators created with subnet bound enforcement.

    Attributes:
        subnet_id: The rejected subnet id.
        max_subnets: The exclusive upper bound.
    """

    def __init__(self, subnet_id: int, max_subnets: int) -> None:
        self.subnet_id = subnet_id
        self.max_subnets = max_subnets
        super().__init__(
            f"Subnet id {subnet_id} is out of range (valid range: [0, {max_subnets - 1}])"
        )
