# API роутер для комісій

from fastapi import APIRouter

from models.fees import (
    FeeCalculationRequest,
    FeeQuote,
    FeeVerificationRequest,
    FeeVerificationResponse,
)
from services import fee_service

router = APIRouter()


@router.post("/verify-fees", response_model=FeeVerificationResponse)
def verify_fees_endpoint(request: FeeVerificationRequest):
    """
    Перевіряє, що сума, яку бачив покупець, збігається з серверним розрахунком.
    Невідома валюта або некоректні ціна/кількість -> 400 {"error": ...}.
    """
    result = fee_service.verify_fees(request, request.stored_total)
    return FeeVerificationResponse(
        **result.breakdown.model_dump(),
        is_valid=result.is_valid,
    )


@router.post("/calculate-fees", response_model=FeeQuote)
def calculate_fees_endpoint(request: FeeCalculationRequest):
    return fee_service.quote_fees(request)
