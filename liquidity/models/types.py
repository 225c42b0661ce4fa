"""Shared type definitions for pool, token and price models."""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, Field

# Maximum uint256 value
UINT256_MAX = 2**256 - 1


def validate_uint256(value: Any) -> str:
    """Validate that a value is a valid uint256 decimal string.

    Args:
        value: Value to validate (string or int)

    Returns:
        Valid uint256 as decimal string

    Raises:
        ValueError: If value is not a valid non-negative integer within uint256 range
    """
    # Accept int directly
    if isinstance(value, int) and not isinstance(value, bool):
        int_value = value
    elif isinstance(value, str):
        try:
            int_value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint256 must be a decimal integer string: '{value}'") from err
    else:
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if int_value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")

    return str(int_value)


def validate_decimal_string(value: Any) -> str:
    """Validate a non-negative decimal amount given as string or number.

    Floats are rejected so prices and weights never carry binary rounding
    error into fixed-point math.
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise ValueError(f"Decimal amount must be a string or int, got {type(value).__name__}")
    if not isinstance(value, str | int | Decimal):
        raise ValueError(f"Decimal amount must be a string or int, got {type(value).__name__}")
    try:
        parsed = Decimal(str(value))
    except InvalidOperation as err:
        raise ValueError(f"Invalid decimal amount: '{value}'") from err
    if not parsed.is_finite():
        raise ValueError(f"Decimal amount must be finite: '{value}'")
    if parsed < 0:
        raise ValueError(f"Decimal amount cannot be negative: '{value}'")
    return str(value)


def normalize_address(address: str) -> str:
    """Normalize an Ethereum address to lowercase with 0x prefix."""
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr
    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address.

    Args:
        address: String to validate

    Returns:
        True if valid Ethereum address format
    """
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


# Ethereum address (40 hex chars after 0x prefix), stored lowercase
Address = Annotated[
    str,
    Field(pattern=r"^0x[a-fA-F0-9]{40}$"),
    AfterValidator(normalize_address),
]

# 256-bit unsigned integer as decimal string (validated)
Uint256 = Annotated[
    str,
    BeforeValidator(validate_uint256),
    Field(description="256-bit unsigned integer as decimal string"),
]

# Non-negative decimal amount as string (prices, weights, rates)
DecimalString = Annotated[
    str,
    BeforeValidator(validate_decimal_string),
    Field(description="Non-negative decimal amount as string"),
]

# Balancer pool id (32 bytes)
PoolId = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{64}$")]
