"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from ..exceptions import MalformedMoneyError


AmountLike = Union[Decimal, int, float, str]


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    No arithmetic is defined here: a Money is built once per order and
    embedded in exactly one Order snapshot.

    CRITICAL: Always store Decimal, never float!
    """
    amount: Decimal
    currency: str

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', _to_decimal(self.amount))
        elif not self.amount.is_finite():
            raise MalformedMoneyError(f"Amount must be a finite decimal, got: {self.amount}")

        if not isinstance(self.currency, str) or not self.currency.strip():
            raise MalformedMoneyError(
                f"Currency must be a non-empty string, got: {self.currency!r}"
            )

    @classmethod
    def of(cls, amount: AmountLike, currency: str) -> "Money":
        """
        Build a Money from a raw amount and currency code.

        Args:
            amount: Decimal, int, float or decimal string
            currency: Currency code (format is not checked)

        Returns:
            New Money instance

        Raises:
            MalformedMoneyError: If amount is not a finite decimal or
                currency is empty
        """
        return cls(amount=_to_decimal(amount), currency=currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


def _to_decimal(value: AmountLike) -> Decimal:
    if isinstance(value, bool):
        raise MalformedMoneyError(f"Amount must be a decimal number, got: {value!r}")
    try:
        # str() first so floats keep their printed value (100.0, not 100.00000000000000001)
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError) as e:
        raise MalformedMoneyError(f"Amount must be a decimal number, got: {value!r}") from e
    if not result.is_finite():
        raise MalformedMoneyError(f"Amount must be a finite decimal, got: {value!r}")
    return result
