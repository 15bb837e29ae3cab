import logging
from typing import Optional

from passlib.context import CryptContext

from tourney.core import security
from tourney.core.database import Store
from tourney.core.errors import AuthError, ValidationError
from tourney.core.sessions import AdminIdentity
from tourney.models import Admin

logger = logging.getLogger(__name__)

BAD_CREDENTIALS = "Identifiants incorrects"
MIN_PASSWORD_LENGTH = 6


def seed_admin(
    store: Store, username: str, password: str, pwd_context: Optional[CryptContext] = None
) -> Optional[Admin]:
    """Creates the first admin account when the admins table is empty."""
    with store.transaction() as db:
        if db.query(Admin).count() > 0:
            return None
        admin = Admin(username=username, password=security.get_password_hash(password, pwd_context))
        db.add(admin)
        db.flush()
    logger.info("Seeded admin account %r", username)
    return admin


def authenticate(
    store: Store,
    username: Optional[str],
    password: Optional[str],
    pwd_context: Optional[CryptContext] = None,
) -> AdminIdentity:
    """
    Checks admin credentials.

    Absent credentials, unknown usernames and wrong passwords all raise the
    same AuthError so a caller cannot tell which usernames exist.
    """
    if not username or not password:
        raise AuthError(BAD_CREDENTIALS)

    with store.session() as db:
        admin = db.query(Admin).filter(Admin.username == username).first()

    if admin is None:
        security.dummy_verify(pwd_context)
        logger.warning("Login failed for unknown username %r", username)
        raise AuthError(BAD_CREDENTIALS)
    if not security.verify_password(password, admin.password, pwd_context):
        logger.warning("Login failed for %r: wrong password", username)
        raise AuthError(BAD_CREDENTIALS)

    logger.info("Admin %r logged in", username)
    return AdminIdentity(admin_id=admin.id, username=admin.username)


def change_password(
    store: Store,
    admin_id: int,
    current_password: Optional[str],
    new_password: Optional[str],
    pwd_context: Optional[CryptContext] = None,
) -> None:
    if not current_password or not new_password:
        raise ValidationError("Mots de passe requis")
    if len(new_password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Minimum {MIN_PASSWORD_LENGTH} caractères")

    with store.transaction() as db:
        admin = db.query(Admin).filter(Admin.id == admin_id).first()
        if admin is None or not security.verify_password(current_password, admin.password, pwd_context):
            raise AuthError("Mot de passe actuel incorrect")
        admin.password = security.get_password_hash(new_password, pwd_context)

    logger.info("Admin id=%s changed password", admin_id)
