"""Currency conversion over a rate table supplied by the FX collaborator."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from portfolio_mcp import config


@dataclass(frozen=True)
class FxRates:
    """
    Immutable rate table. Rates are local currency units per 1 base unit.

    The base currency always converts at 1.0, whether or not it is listed.
    """

    rates: Mapping[str, float] = field(default_factory=dict)
    base_currency: str = config.BASE_CURRENCY

    def __post_init__(self) -> None:
        # Normalize codes: uppercase, strip whitespace
        normalized = {code.upper().strip(): float(rate) for code, rate in self.rates.items()}
        object.__setattr__(self, "rates", normalized)
        object.__setattr__(self, "base_currency", self.base_currency.upper().strip())

    def get_rate(self, currency: str) -> float | None:
        """Rate for a currency code, 1.0 for the base currency, None if unknown."""
        code = currency.upper().strip()
        if code == self.base_currency:
            return 1.0
        return self.rates.get(code)

    def rates_map(self) -> dict[str, float]:
        """All known rates, including the base currency at 1.0."""
        return {**self.rates, self.base_currency: 1.0}

    def to_base(self, amount: float, currency: str) -> float:
        """
        Convert an amount in local currency to the base currency.

        Raises:
            ValueError: If the currency has no positive rate
        """
        return amount / self._require_rate(currency)

    def from_base(self, amount: float, currency: str) -> float:
        """
        Convert an amount in the base currency to local currency.

        Raises:
            ValueError: If the currency has no positive rate
        """
        return amount * self._require_rate(currency)

    def _require_rate(self, currency: str) -> float:
        rate = self.get_rate(currency)
        if rate is None or not rate > 0:
            raise ValueError(f"No valid exchange rate for {currency!r}")
        return rate
