from typing import List

from fastapi import APIRouter, HTTPException, status

from models.currency import CurrencyProfile
from services import currency_service

router = APIRouter(tags=["Currency"])


@router.get("/", response_model=List[CurrencyProfile])
def list_currencies():
    """
    Повертає всі підтримувані країни з їх валютами (у порядку таблиці).
    """
    return currency_service.list_currency_profiles()


@router.get("/{country_code}", response_model=CurrencyProfile)
def get_currency(country_code: str):
    profile = currency_service.get_currency_by_country_code(country_code)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unsupported country code: {country_code}",
        )
    return profile
