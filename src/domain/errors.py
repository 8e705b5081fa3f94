from __future__ import annotations


class OracleError(Exception):
    """Base class for every failure a query or instantiation can produce."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnrecognizedAsset(OracleError):
    def __init__(self, identifier: str) -> None:
        super().__init__("Unrecognized asset")
        self.identifier = identifier


class ArithmeticOverflow(OracleError):
    def __init__(self, *, operation: str, left: int, right: int) -> None:
        super().__init__(f"Cannot {operation} with {left} and {right}")
        self.operation = operation
        self.left = left
        self.right = right


class DivideByZero(OracleError):
    def __init__(self, dividend: int) -> None:
        super().__init__(f"Cannot divide {dividend} by zero")
        self.dividend = dividend


class AnchorPriceMissing(OracleError):
    def __init__(self, identifier: str) -> None:
        # Same message for either anchor.
        super().__init__("USDC<>DEX price not set")
        self.identifier = identifier


class InvalidSwapAsset(OracleError):
    def __init__(self, identifier: str) -> None:
        super().__init__("invalid juno-type swap assets")
        self.identifier = identifier


class StateNotFound(OracleError):
    def __init__(self, key: str) -> None:
        super().__init__(f"{key} not found")
        self.key = key


class MessageDecodeError(OracleError):
    pass


__all__ = [
    "AnchorPriceMissing",
    "ArithmeticOverflow",
    "DivideByZero",
    "InvalidSwapAsset",
    "MessageDecodeError",
    "OracleError",
    "StateNotFound",
    "UnrecognizedAsset",
]
