from __future__ import annotations


class Currency:
    """Opaque currency tag with a code and a human-friendly name.

    Money arithmetic only needs to know whether two currencies are the same, so equality
    and hashing are based on `code` alone. Precision is not a property of the currency:
    all amounts carry exactly two fractional digits.

    Attributes:
        code (str): Currency code (e.g., "USD", "CZK").
        name (str): Full currency name; defaults to the code.
    """

    def __init__(self, code: str, name: str | None = None):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD").
            name (str | None): Full currency name. If None, the code is used.

        Raises:
            ValueError: If $code or $name is not a non-empty string.
        """
        # Raise: code must be a non-empty string
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        # Raise: name, when given, must be a non-empty string
        if name is not None and (not isinstance(name, str) or not name.strip()):
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        self._code = code.upper().strip()
        self._name = name.strip() if name is not None else self._code

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @classmethod
    def from_str(cls, code: str) -> Currency:
        """Get currency from the default registry by code.

        Args:
            code (str): Currency code to look up (case-insensitive).

        Returns:
            Currency: The registered currency instance.

        Raises:
            ValueError: If currency code is not found in the registry.
        """
        from money_math.domain.monetary.currency_registry import DEFAULT_REGISTRY

        return DEFAULT_REGISTRY.get(code)

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}', '{self.name}')"
