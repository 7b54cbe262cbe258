import logging

from models.currency import CurrencyProfile

logger = logging.getLogger(__name__)


def _profile(country_code, country_name, dial_code, currency_code, currency_name, currency_symbol):
    return CurrencyProfile(
        country_code=country_code,
        country_name=country_name,
        dial_code=dial_code,
        currency_code=currency_code,
        currency_name=currency_name,
        currency_symbol=currency_symbol,
    )


# Порядок важливий: при пошуку за кодом валюти перемагає перший запис
AFRICAN_COUNTRIES: tuple[CurrencyProfile, ...] = (
    _profile("EG", "Egypt", "+20", "EGP", "Egyptian Pound", "E£"),
    _profile("KE", "Kenya", "+254", "KES", "Kenyan Shilling", "KSh"),
    _profile("ZA", "South Africa", "+27", "ZAR", "South African Rand", "R"),
    _profile("GH", "Ghana", "+233", "GHS", "Ghanaian Cedi", "₵"),
    _profile("TZ", "Tanzania", "+255", "TZS", "Tanzanian Shilling", "TSh"),
    _profile("MA", "Morocco", "+212", "MAD", "Moroccan Dirham", "MAD"),
    _profile("SN", "Senegal", "+221", "XOF", "West African CFA Franc", "CFA"),
    _profile("CI", "Côte d'Ivoire", "+225", "XOF", "West African CFA Franc", "CFA"),
    _profile("UG", "Uganda", "+256", "UGX", "Ugandan Shilling", "USh"),
    _profile("ZM", "Zambia", "+260", "ZMW", "Zambian Kwacha", "ZK"),
)

_BY_COUNTRY = {c.country_code: c for c in AFRICAN_COUNTRIES}

_BY_CURRENCY: dict[str, CurrencyProfile] = {}
for _c in AFRICAN_COUNTRIES:
    _BY_CURRENCY.setdefault(_c.currency_code, _c)


def list_currency_profiles() -> list[CurrencyProfile]:
    return list(AFRICAN_COUNTRIES)


def get_currency_by_country_code(country_code: str) -> CurrencyProfile | None:
    if not country_code:
        return None
    return _BY_COUNTRY.get(country_code.upper())


def find_currency(currency_code: str) -> CurrencyProfile | None:
    """
    Точний пошук за кодом валюти (з урахуванням регістру).
    Для спільних валют (XOF) повертає першу країну з таблиці.
    """
    return _BY_CURRENCY.get(currency_code)


def get_country_code_by_currency(currency_code: str) -> str | None:
    """Фільтр подій за країною: код валюти -> код першої країни, без урахування регістру."""
    if not currency_code:
        return None
    profile = _BY_CURRENCY.get(currency_code.upper())
    return profile.country_code if profile else None


def _plain_number(amount: float) -> str:
    if float(amount).is_integer():
        return str(int(amount))
    return repr(float(amount))


def format_currency(amount: float, currency_or_country_code: str) -> str:
    """
    Форматує суму для відображення: "ZAR 1,234.50".
    Спочатку пробуємо як код країни, потім як код валюти.
    Невідомий код -> просто число.
    """
    profile = get_currency_by_country_code(currency_or_country_code) or find_currency(
        currency_or_country_code
    )
    if profile is None:
        logger.debug(f"Unknown currency for formatting: {currency_or_country_code}")
        return _plain_number(amount)

    sign = "-" if amount < 0 else ""
    return f"{sign}{profile.currency_code} {abs(amount):,.2f}"
