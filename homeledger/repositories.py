"""
Repositories over the three record kinds.

Each method opens its own session and transaction from the shared session
factory, so a repository instance can be built once at startup and shared
by every request. Returned records are detached but fully loaded.
"""

from typing import List, Optional

from sqlalchemy.orm import sessionmaker

from homeledger.logging_config import get_logger
from homeledger.models.mortgage import MortgageCalculationRecord
from homeledger.models.property import RealEstateProperty
from homeledger.models.user import User
from homeledger.utils.auth import hash_password

logger = get_logger(__name__)


class UserRepository:
    """Users, with password hashing on every write that sets a password."""

    def __init__(self, sessions: sessionmaker):
        self._sessions = sessions

    def create(self, username: str, password: str) -> User:
        user = User(username=username, password=hash_password(password))
        with self._sessions.begin() as session:
            session.add(user)
        return user

    def get(self, user_id: str) -> Optional[User]:
        with self._sessions() as session:
            return session.get(User, user_id)

    def find_by_username(self, username: str) -> Optional[User]:
        with self._sessions() as session:
            return session.query(User).filter(User.username == username).first()

    def update_password(self, user_id: str, password: str) -> bool:
        """Replace a user's password digest. Returns False if the user is unknown."""
        with self._sessions.begin() as session:
            user = session.get(User, user_id)
            if user is None:
                return False
            user.password = hash_password(password)
        return True

    def push_mortgage_calculation(self, user_id: str, calculation_id: str) -> bool:
        return self._push(user_id, "mortgage_calculations", calculation_id)

    def push_real_estate_property(self, user_id: str, property_id: str) -> bool:
        return self._push(user_id, "real_estate_properties", property_id)

    def _push(self, user_id: str, field: str, value: str) -> bool:
        # Update-by-id under a row lock; an unknown user is a silent no-op.
        with self._sessions.begin() as session:
            user = session.get(User, user_id, with_for_update=True)
            if user is None:
                logger.warning(f"No user {user_id}; {field} reference {value} not recorded")
                return False
            setattr(user, field, [*getattr(user, field), value])
        return True


class MortgageCalculationRepository:

    def __init__(self, sessions: sessionmaker):
        self._sessions = sessions

    def create(
        self,
        loan_amount: float,
        interest_rate: float,
        term: float,
        property_value: float,
    ) -> MortgageCalculationRecord:
        record = MortgageCalculationRecord(
            loan_amount=loan_amount,
            interest_rate=interest_rate,
            term=term,
            property_value=property_value,
        )
        with self._sessions.begin() as session:
            session.add(record)
        return record

    def get(self, calculation_id: str) -> Optional[MortgageCalculationRecord]:
        with self._sessions() as session:
            return session.get(MortgageCalculationRecord, calculation_id)

    def count(self) -> int:
        with self._sessions() as session:
            return session.query(MortgageCalculationRecord).count()


class PropertyRepository:

    def __init__(self, sessions: sessionmaker):
        self._sessions = sessions

    def create(self, **fields) -> RealEstateProperty:
        prop = RealEstateProperty(**fields)
        with self._sessions.begin() as session:
            session.add(prop)
        return prop

    def find_by_user(self, user_id: str) -> List[RealEstateProperty]:
        with self._sessions() as session:
            return session.query(RealEstateProperty).filter(
                RealEstateProperty.user_id == user_id
            ).all()
