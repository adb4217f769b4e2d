"""
auth/store.py -- SQLAlchemy Core persistence layer for accounts.

Pattern: Repository + Data Mapper. AccountStore is the repository;
_row_to_account is the mapper. Flows and routes never touch SQL directly.

Security:
  All queries use bound parameters. No f-strings in SQL.

Uniqueness:
  accounts.email carries a UNIQUE constraint. This is the source of truth
  under concurrency: two registrations racing for the same email both pass
  the flow-level lookup, but only one INSERT succeeds. The loser gets
  sqlalchemy.exc.IntegrityError, which the flows translate into
  DuplicateEmail / EmailInUse. The store itself does not translate it.

DB path: auth/accountgate.db unless Settings.database_url says otherwise.

Layer rule: no imports from api/.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, MetaData, String, Table, Text, create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import SingletonThreadPool

from auth.models import Account
from core.config import get_settings

logger = logging.getLogger("accountgate.store")

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

_metadata = MetaData()

_accounts = Table(
    "accounts",
    _metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),
    Column("created_at", String(32), nullable=False),
    Column("updated_at", String(32), nullable=False),
)

# Columns update() is allowed to touch. id and created_at are immutable.
_MUTABLE_FIELDS = frozenset({"name", "email", "password_hash"})


# ---------------------------------------------------------------------------
# Engine helpers
# ---------------------------------------------------------------------------


def _is_memory_sqlite(db_url: str) -> bool:
    """True for :memory: and mode=memory SQLite URLs, which live only as long as a connection."""
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite":
        return False
    return url.database in (None, "", ":memory:") or url.query.get("mode") == "memory"


def _set_wal_mode(dbapi_conn, connection_record) -> None:
    """Enable WAL journal mode so readers are not blocked during writes.

    Set per-connection because SQLite PRAGMAs are not inherited by new
    connections from the pool.
    """
    dbapi_conn.execute("PRAGMA journal_mode=WAL")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class AccountStore:
    """Repository for Account entities.

    Usage:
        store = AccountStore()
        account = store.insert(Account(name="A", email="a@x.com", password_hash=hash_password("secret")))
        same = store.find_by_email("a@x.com")
        store.update(account.id, {"name": "B"})
        store.close()
    """

    def __init__(self, db_url: str | None = None) -> None:
        db_url = db_url or get_settings().database_url
        connect_args: dict = {}
        if db_url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        engine_kwargs: dict = {}
        if _is_memory_sqlite(db_url):
            # One connection per thread keeps an in-memory database alive.
            engine_kwargs["poolclass"] = SingletonThreadPool
        self.engine: Engine = create_engine(db_url, connect_args=connect_args, **engine_kwargs)
        if db_url.startswith("sqlite"):
            event.listen(self.engine, "connect", _set_wal_mode)
        _metadata.create_all(self.engine)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_email(self, email: str) -> Account | None:
        """Look up an account by exact email (case-sensitive). Returns None if not found."""
        with self.engine.connect() as conn:
            row = conn.execute(_accounts.select().where(_accounts.c.email == email)).fetchone()
        return _row_to_account(row) if row is not None else None

    def find_by_id(self, account_id: int) -> Account | None:
        """Look up an account by primary key. Returns None if not found."""
        with self.engine.connect() as conn:
            row = conn.execute(_accounts.select().where(_accounts.c.id == account_id)).fetchone()
        return _row_to_account(row) if row is not None else None

    def has_email(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def insert(self, account: Account) -> Account:
        """Insert a new account and return it with id and timestamps filled in.

        Raises sqlalchemy.exc.IntegrityError if the email already exists.
        """
        now = _now_iso()
        with self.engine.begin() as conn:
            result = conn.execute(
                _accounts.insert().values(
                    name=account.name,
                    email=account.email,
                    password_hash=account.password_hash,
                    created_at=now,
                    updated_at=now,
                )
            )
            account_id = result.inserted_primary_key[0]
            row = conn.execute(_accounts.select().where(_accounts.c.id == account_id)).fetchone()
        logger.debug("Inserted account %s", account_id)
        return _row_to_account(row)

    def update(self, account_id: int, changes: dict) -> Account | None:
        """Apply changes to an account in a single transaction.

        Accepted keys: name, email, password_hash. Unknown keys raise
        ValueError before any SQL runs. Either every change commits or none
        does.

        Returns the refreshed Account, or None if account_id does not exist.
        Raises sqlalchemy.exc.IntegrityError if the new email is taken.
        """
        unknown = set(changes) - _MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown account fields: {sorted(unknown)!r}")
        with self.engine.begin() as conn:
            result = conn.execute(
                _accounts.update()
                .where(_accounts.c.id == account_id)
                .values(**changes, updated_at=_now_iso())
            )
            if result.rowcount == 0:
                return None
            row = conn.execute(_accounts.select().where(_accounts.c.id == account_id)).fetchone()
        return _row_to_account(row)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def ping(self) -> bool:
        """Return True if the database answers a trivial query."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception:
            logger.exception("Account store ping failed")
            return False
        return True

    def close(self) -> None:
        self.engine.dispose()


# ---------------------------------------------------------------------------
# Row mapper (Data Mapper pattern)
# ---------------------------------------------------------------------------


def _row_to_account(row) -> Account:
    return Account(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
