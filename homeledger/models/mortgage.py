"""
Mortgage Calculation Model

Stores the inputs of every mortgage calculation requested through the API,
whether or not it is linked to a user.
"""

from sqlalchemy import Column, String, Float, DateTime
from datetime import datetime

from homeledger.models import Base, generate_id


class MortgageCalculationRecord(Base):
    """
    Inputs of a single mortgage calculation.

    Attributes:
        id: Generated identifier
        loan_amount: Amount borrowed
        interest_rate: Annual interest rate in percent (5.0 means 5%)
        term: Loan term in years
        property_value: Value of the financed property (informational)
        timestamp: When the calculation was recorded
    """
    __tablename__ = "mortgage_calculations"

    id = Column(String(24), primary_key=True, default=generate_id)
    loan_amount = Column(Float)
    interest_rate = Column(Float)
    term = Column(Float)
    property_value = Column(Float)
    timestamp = Column(DateTime, default=datetime.utcnow)
