# Pydantic моделі для валют

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CurrencyProfile(BaseModel):
    """Одна країна з таблиці підтримуваних валют."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    country_code: str      # ISO 3166-1 alpha-2, напр. "ZA"
    country_name: str
    dial_code: str         # "+27"
    currency_code: str     # ISO 4217, напр. "ZAR" (не унікальний: XOF у SN та CI)
    currency_name: str
    currency_symbol: str
