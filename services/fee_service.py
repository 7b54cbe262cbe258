# Сервісний шар для розрахунку комісій при продажу квитків

import logging
import math

from core.exceptions import InvalidFeeInputError, UnknownCurrencyError
from models.fees import (
    FeeBreakdown,
    FeeCalculationRequest,
    FeeQuote,
    FeeVerification,
    FormattedAmounts,
)
from services.currency_service import find_currency, format_currency

logger = logging.getLogger(__name__)

# Платіжний процесор: відсоток від суми + фіксована плата за кожен квиток
PROCESSOR_FEE_RATE = 0.029  # 2.9%
DEFAULT_FIXED_FEE = 0.30
FIXED_FEE_PER_UNIT = {
    "EGP": 3.00,
    "KES": 30.00,
    "ZAR": 1.50,
    "GHS": 0.30,
    "TZS": 700.00,
    "MAD": 3.00,
    "XOF": 100.00,
    "UGX": 1000.00,
    "ZMW": 3.00,
}

# Наша комісія
INDIVIDUAL_COMMISSION_RATE = 0.05  # 5% для окремих видавців
ORGANIZATION_COMMISSION_RATE = 0.04  # 4% для організацій

# Переказ виплати видавцю
REMITTANCE_FEE_RATE = 0.015  # 1.5%

# Допуск при звірці суми з клієнтом (один цент)
TOTAL_TOLERANCE = 0.01


def fixed_fee_per_unit(currency_code: str) -> float:
    return FIXED_FEE_PER_UNIT.get(currency_code, DEFAULT_FIXED_FEE)


def commission_rate(is_organization: bool) -> float:
    return ORGANIZATION_COMMISSION_RATE if is_organization else INDIVIDUAL_COMMISSION_RATE


def validate_fee_inputs(unit_price: float, quantity: int | float) -> None:
    if isinstance(unit_price, bool) or not isinstance(unit_price, (int, float)):
        raise InvalidFeeInputError(f"Price must be a number, got {unit_price!r}")
    if not math.isfinite(unit_price) or unit_price < 0:
        raise InvalidFeeInputError(f"Price must be a non-negative number, got {unit_price}")
    if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
        raise InvalidFeeInputError(f"Quantity must be a whole number, got {quantity!r}")
    # 2.0 з JSON - ок, 2.5 - ні
    if isinstance(quantity, float) and not quantity.is_integer():
        raise InvalidFeeInputError(f"Quantity must be a whole number, got {quantity!r}")
    if quantity < 1:
        raise InvalidFeeInputError(f"Quantity must be at least 1, got {quantity}")


def calculate_fees(
    unit_price: float,
    quantity: int,
    is_organization: bool,
    currency_code: str,
) -> FeeBreakdown:
    """
    Розраховує всі суми для однієї покупки квитків.

    Покупець платить: subtotal + комісія процесора + наша комісія.
    Видавець отримує: subtotal - наша комісія - плата за переказ.
    Округлення не робимо, це справа того, хто показує суми.
    """
    if find_currency(currency_code) is None:
        logger.warning(f"Fee calculation rejected, unknown currency: {currency_code}")
        raise UnknownCurrencyError(currency_code)

    try:
        validate_fee_inputs(unit_price, quantity)
    except InvalidFeeInputError as e:
        logger.warning(f"Fee calculation rejected: {e}")
        raise

    quantity = int(quantity)
    try:
        subtotal = unit_price * quantity
        processor_fee = subtotal * PROCESSOR_FEE_RATE + fixed_fee_per_unit(currency_code) * quantity
        commission = subtotal * commission_rate(is_organization)
        total_to_charge = subtotal + processor_fee + commission
    except OverflowError:
        total_to_charge = math.inf
    if not math.isfinite(total_to_charge):
        logger.warning(f"Fee calculation overflow: price={unit_price}, quantity={quantity}")
        raise InvalidFeeInputError("Amount too large")

    seller_gross_amount = subtotal - commission
    remittance_fee = seller_gross_amount * REMITTANCE_FEE_RATE
    seller_net_amount = seller_gross_amount - remittance_fee

    return FeeBreakdown(
        subtotal=subtotal,
        processor_fee=processor_fee,
        commission=commission,
        total_to_charge=total_to_charge,
        seller_gross_amount=seller_gross_amount,
        remittance_fee=remittance_fee,
        seller_net_amount=seller_net_amount,
    )


def is_total_valid(expected_total: float, client_total: float) -> bool:
    return abs(expected_total - client_total) < TOTAL_TOLERANCE


def calculate_for_request(request: FeeCalculationRequest) -> FeeBreakdown:
    return calculate_fees(
        request.price,
        request.quantity,
        request.is_organization,
        request.currency_code,
    )


def verify_fees(request: FeeCalculationRequest, client_total: float) -> FeeVerification:
    """
    Перераховує суму на сервері і звіряє з тією, яку показав клієнт.
    Розбіжність більше ніж на цент - не помилка, а is_valid=False;
    що робити з оплатою, вирішує платіжний шар.
    """
    breakdown = calculate_for_request(request)
    is_valid = is_total_valid(breakdown.total_to_charge, client_total)

    if not is_valid:
        logger.warning(
            f"Total mismatch for {request.currency_code}: "
            f"expected {breakdown.total_to_charge}, client sent {client_total}"
        )

    return FeeVerification(breakdown=breakdown, is_valid=is_valid)


def quote_fees(request: FeeCalculationRequest) -> FeeQuote:
    """Розрахунок для підсумку на сторінці оформлення, з відформатованими сумами."""
    breakdown = calculate_for_request(request)
    code = request.currency_code

    return FeeQuote(
        **breakdown.model_dump(),
        currency_code=code,
        formatted=FormattedAmounts(
            subtotal=format_currency(breakdown.subtotal, code),
            processor_fee=format_currency(breakdown.processor_fee, code),
            commission=format_currency(breakdown.commission, code),
            total_to_charge=format_currency(breakdown.total_to_charge, code),
        ),
    )
