"""
Real estate property resolvers.

Properties are created against a caller-supplied user id, which is not
checked; the owner's property list is updated when the user exists.
"""

from datetime import datetime, timezone
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from homeledger.exceptions import PropertyLookupError
from homeledger.logging_config import get_logger
from homeledger.models.property import RealEstateProperty
from homeledger.repositories import PropertyRepository, UserRepository

logger = get_logger(__name__)


def parse_purchase_date(value: str) -> datetime:
    """
    Parse an ISO-8601 date or datetime string.

    Aware datetimes are converted to naive UTC. Raises ValueError for
    anything unparsable.
    """
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


class PropertyResolvers:

    def __init__(self, properties: PropertyRepository, users: UserRepository):
        self.properties = properties
        self.users = users

    def add_real_estate_property(
        self,
        user_id: str,
        property_address: str,
        purchase_price: float,
        purchase_date: str,
        original_loan_amount: float,
        current_loan_amount: float,
        interest_rate: float,
        home_type: str,
    ) -> RealEstateProperty:
        prop = self.properties.create(
            property_address=property_address,
            purchase_price=purchase_price,
            purchase_date=parse_purchase_date(purchase_date),
            original_loan_amount=original_loan_amount,
            current_loan_amount=current_loan_amount,
            interest_rate=interest_rate,
            home_type=home_type,
            user_id=user_id,
        )
        self.users.push_real_estate_property(user_id, prop.id)
        logger.info(f"Property added: {property_address} (ID: {prop.id}) for user {user_id}")
        return prop

    def get_user_properties(self, user_id: str) -> List[RealEstateProperty]:
        try:
            return self.properties.find_by_user(user_id)
        except SQLAlchemyError as e:
            logger.exception(f"Error fetching properties for user {user_id}: {e}")
            raise PropertyLookupError() from e
