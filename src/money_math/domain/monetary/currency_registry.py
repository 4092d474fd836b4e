from __future__ import annotations

import logging

from bidict import bidict

from money_math.domain.monetary.currency import Currency

logger = logging.getLogger(__name__)


class CurrencyRegistry:
    """Bi-directional mapping between currency codes and `Currency` instances."""

    def __init__(self, currencies: list[Currency] | None = None):
        self._currencies_by_code_bidict: bidict[str, Currency] = bidict()
        for currency in currencies or []:
            self.register(currency)

    def register(self, currency: Currency, overwrite: bool = False) -> None:
        """Register a currency.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to replace an already registered currency with the same code.

        Raises:
            TypeError: If $currency is not a Currency instance.
            ValueError: If the code is already registered and $overwrite is False.
        """
        # Raise: only Currency instances can be registered
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: do not silently replace an existing currency
        if currency.code in self._currencies_by_code_bidict and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        # Equal currencies compare by code, so drop the old item first or bidict keeps it
        self._currencies_by_code_bidict.pop(currency.code, None)
        self._currencies_by_code_bidict[currency.code] = currency
        logger.debug(f"Registered currency '{currency.code}' ({currency.name})")

    def get(self, code: str) -> Currency:
        """Get currency by code (case-insensitive).

        Raises:
            TypeError: If $code is not a string.
            ValueError: If $code is not registered.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        normalized_code = code.upper().strip()
        if normalized_code not in self._currencies_by_code_bidict:
            raise ValueError(f"Currency with code '{normalized_code}' not found in registry. Available currencies: {self.codes()}")

        return self._currencies_by_code_bidict[normalized_code]

    def code_of(self, currency: Currency) -> str:
        """Return the code under which $currency is registered.

        Raises:
            ValueError: If $currency is not registered.
        """
        if currency not in self._currencies_by_code_bidict.inv:
            raise ValueError(f"Currency {currency!r} is not registered")
        return self._currencies_by_code_bidict.inv[currency]

    def codes(self) -> list[str]:
        return list(self._currencies_by_code_bidict.keys())

    def __contains__(self, item) -> bool:
        if isinstance(item, Currency):
            return item in self._currencies_by_code_bidict.inv
        if isinstance(item, str):
            return item.upper().strip() in self._currencies_by_code_bidict
        return False

    def __len__(self) -> int:
        return len(self._currencies_by_code_bidict)


USD = Currency("USD", "US Dollar")
EUR = Currency("EUR", "Euro")
GBP = Currency("GBP", "British Pound")
CHF = Currency("CHF", "Swiss Franc")
CZK = Currency("CZK", "Czech Koruna")
JPY = Currency("JPY", "Japanese Yen")

DEFAULT_REGISTRY = CurrencyRegistry([USD, EUR, GBP, CHF, CZK, JPY])
