"""
Relational schema for user records.

Uniqueness of login name and e-mail address is enforced here, by the
database, so that concurrent writers can never both succeed.
"""

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.engine import Engine

USERS_TABLE = "users"
LOGIN_NAME_COLUMN = "login_name"
LOGIN_NAME_CONSTRAINT = "users_login_name_key"
EMAIL_ADDRESS_COLUMN = "email_address"
EMAIL_ADDRESS_CONSTRAINT = "users_email_address_key"
ID_SEQUENCE = "users_id_seq"

metadata = MetaData()

users = Table(
    USERS_TABLE,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("created_at", DateTime, nullable=False),
    Column("updated_at", DateTime, nullable=False),
    Column(LOGIN_NAME_COLUMN, String(255), nullable=False),
    Column(EMAIL_ADDRESS_COLUMN, String(255), nullable=False),
    Column("first_name", String(255), nullable=False),
    Column("last_name", String(255), nullable=False),
    UniqueConstraint(LOGIN_NAME_COLUMN, name=LOGIN_NAME_CONSTRAINT),
    UniqueConstraint(EMAIL_ADDRESS_COLUMN, name=EMAIL_ADDRESS_CONSTRAINT),
    # Never reuse ids on SQLite unless the sequence is reset explicitly
    sqlite_autoincrement=True,
)


def create_schema(engine: Engine) -> None:
    """Create the users table if it does not exist yet."""
    metadata.create_all(engine)
