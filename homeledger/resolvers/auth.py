from sqlalchemy.exc import IntegrityError

from homeledger.exceptions import InvalidCredentialsError, UsernameTakenError
from homeledger.logging_config import get_logger
from homeledger.repositories import UserRepository
from homeledger.utils.auth import create_access_token, verify_password

# Module logger for authentication operations
logger = get_logger(__name__)


class AuthResolvers:
    """signUp / logIn. Both return a freshly signed token for the user."""

    def __init__(self, users: UserRepository):
        self.users = users

    def sign_up(self, username: str, password: str) -> str:
        logger.info(f"Registration attempt for username: {username}")
        try:
            user = self.users.create(username, password)
        except IntegrityError as e:
            # The driver message embeds the statement and bound digest.
            logger.warning(f"Registration failed - username already taken: {username}")
            raise UsernameTakenError() from e
        logger.info(f"New user registered successfully: {username}")
        return create_access_token(user.id)

    def log_in(self, username: str, password: str) -> str:
        logger.info(f"Login attempt for username: {username}")
        user = self.users.find_by_username(username)
        if user is None or not verify_password(password, user.password):
            logger.warning(f"Login failed for username: {username} - invalid credentials")
            raise InvalidCredentialsError()
        logger.info(f"Login successful for user: {username}")
        return create_access_token(user.id)
