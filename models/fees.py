# Pydantic моделі для розрахунку комісій

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FeeCalculationRequest(_CamelModel):
    price: float            # ціна одного квитка
    quantity: float         # ціле число; дробове відхиляє сервіс (400), а не pydantic
    is_organization: bool = False
    currency_code: str


class FeeVerificationRequest(FeeCalculationRequest):
    stored_total: float     # сума, яку показав клієнт


class FeeBreakdown(_CamelModel):
    model_config = ConfigDict(frozen=True)

    subtotal: float
    processor_fee: float
    commission: float
    total_to_charge: float
    seller_gross_amount: float
    remittance_fee: float
    seller_net_amount: float


class FeeVerification(_CamelModel):
    model_config = ConfigDict(frozen=True)

    breakdown: FeeBreakdown
    is_valid: bool


class FeeVerificationResponse(FeeBreakdown):
    is_valid: bool


class FormattedAmounts(_CamelModel):
    subtotal: str
    processor_fee: str
    commission: str
    total_to_charge: str


class FeeQuote(FeeBreakdown):
    currency_code: str
    formatted: FormattedAmounts
