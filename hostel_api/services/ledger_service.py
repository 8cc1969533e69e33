# hostel_api/services/ledger_service.py
"""Rent payment and extra food entries.

Both ledgers are append-mostly lists of manually recorded entries; the
remaining balance is whatever the caller computed and is stored verbatim.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from .base_service import BaseService
from ..models.ledger import RentPayment, ExtraFood


class RentPaymentService(BaseService[RentPayment]):
    label = "Rent entry"

    def __init__(self, db: AsyncSession):
        super().__init__(RentPayment, db)


class ExtraFoodService(BaseService[ExtraFood]):
    label = "Extra food entry"

    def __init__(self, db: AsyncSession):
        super().__init__(ExtraFood, db)
