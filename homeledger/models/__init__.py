import secrets

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def generate_id() -> str:
    """New record identifier: 24 lowercase hex characters."""
    return secrets.token_hex(12)
