from sqlalchemy import Column, String, JSON
from homeledger.models import Base, generate_id


class User(Base):
    """
    Registered account.

    The password column only ever holds a bcrypt digest; see
    UserRepository.create / update_password. The two id lists are weak
    back-references to records owned by the user, appended to as those
    records are created and never cascaded.
    """
    __tablename__ = "users"
    id = Column(String(24), primary_key=True, default=generate_id)
    username = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)
    mortgage_calculations = Column(JSON, nullable=False, default=list)
    real_estate_properties = Column(JSON, nullable=False, default=list)

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
