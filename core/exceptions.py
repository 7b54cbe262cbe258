# Помилки розрахунку комісій


class FeeCalculationError(Exception):
    """Базова помилка розрахунку. API віддає її як 400 {"error": ...}."""


class UnknownCurrencyError(FeeCalculationError):
    def __init__(self, currency_code: str):
        self.currency_code = currency_code
        super().__init__(f"Invalid currency code: {currency_code}")


class InvalidFeeInputError(FeeCalculationError):
    """Від'ємна ціна, нульова/дробова кількість і т.п."""
