"""
Mortgage resolvers.

Provides the monthly payment calculation and the persistence of
calculation inputs, optionally linked to a user.
"""

import math
from dataclasses import dataclass
from typing import Optional

from homeledger.logging_config import get_logger
from homeledger.models.mortgage import MortgageCalculationRecord
from homeledger.repositories import MortgageCalculationRepository, UserRepository

logger = get_logger(__name__)


@dataclass
class MortgageQuote:
    monthly_payment: Optional[float]
    property_value: float


def calculate_monthly_payment(loan_amount: float, interest_rate: float, term: int) -> Optional[float]:
    """
    Fixed-rate monthly payment from the standard amortization formula.

    Args:
        loan_amount: Amount borrowed
        interest_rate: Annual rate in percent (6 means 6%)
        term: Loan term in years

    Returns:
        The monthly payment, or None when the result is not a finite number
        (zero rate, zero term, overflow).
    """
    monthly_rate = interest_rate / 100 / 12
    total_payments = term * 12
    try:
        growth = (1 + monthly_rate) ** total_payments
        payment = loan_amount * growth * monthly_rate / (growth - 1)
    except (ZeroDivisionError, OverflowError):
        return None
    # A negative growth base with a fractional exponent yields a complex number.
    if not isinstance(payment, float) or not math.isfinite(payment):
        return None
    return payment


class MortgageResolvers:

    def __init__(self, calculations: MortgageCalculationRepository, users: UserRepository):
        self.calculations = calculations
        self.users = users

    def calculate_mortgage(
        self,
        loan_amount: float,
        interest_rate: float,
        term: int,
        property_value: float,
    ) -> MortgageQuote:
        logger.info("Calculating ...")
        monthly_payment = calculate_monthly_payment(loan_amount, interest_rate, term)

        # Inputs are recorded whether or not the payment was computable.
        record = self.calculations.create(loan_amount, interest_rate, term, property_value)
        logger.debug(f"Mortgage calculation recorded (ID: {record.id}), payment: {monthly_payment}")

        return MortgageQuote(monthly_payment=monthly_payment, property_value=property_value)

    def save_mortgage_calculation(
        self,
        user_id: str,
        loan_amount: float,
        interest_rate: float,
        term: int,
        property_value: float,
    ) -> MortgageCalculationRecord:
        record = self.calculations.create(loan_amount, interest_rate, term, property_value)
        self.users.push_mortgage_calculation(user_id, record.id)
        logger.info(f"Mortgage calculation saved (ID: {record.id}) for user {user_id}")
        return record
