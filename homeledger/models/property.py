from sqlalchemy import Column, String, Float, DateTime
from homeledger.models import Base, generate_id


class RealEstateProperty(Base):
    """
    A property owned by a user.

    ``user_id`` is a plain indexed column rather than a foreign key: a
    property may reference a user that does not exist.
    """
    __tablename__ = "real_estate_properties"

    id = Column(String(24), primary_key=True, default=generate_id)
    property_address = Column(String)
    purchase_price = Column(Float)
    purchase_date = Column(DateTime)
    original_loan_amount = Column(Float)
    current_loan_amount = Column(Float)
    interest_rate = Column(Float)
    home_type = Column(String)
    user_id = Column(String(24), index=True, nullable=True)
