"""Relational-database repository for wallets."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import (
    BigInteger,
    Column,
    MetaData,
    String,
    Table,
    create_engine,
    insert,
    select,
    text,
    update,
)
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError

from walletsvc.domain import InsufficientFundsError, Wallet, WalletNotFoundError
from walletsvc.memory_repo import Repository

metadata = MetaData()

wallets_table = Table(
    "wallets",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("balance", BigInteger, nullable=False, default=0, server_default=text("0")),
)


@dataclass
class DBConfig:
    """Connection settings for the MySQL database."""

    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    dbname: str = "wallet"

    def dsn(self) -> str:
        """Return the connection URL for this configuration."""
        url = URL.create(
            "mysql+pymysql",
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.dbname,
            query={"charset": "utf8mb4"},
        )
        return url.render_as_string(hide_password=False)


class SQLRepo(Repository):
    """Repository storing wallets in a ``wallets`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        try:
            metadata.create_all(engine)
        except SQLAlchemyError as exc:
            raise RuntimeError(f"failed to migrate database: {exc}") from exc

    @classmethod
    def from_config(cls, config: DBConfig) -> SQLRepo:
        """Connect to the database described by ``config`` and prepare its schema."""
        try:
            engine = create_engine(config.dsn(), pool_pre_ping=True)
            with engine.connect():
                pass
        except SQLAlchemyError as exc:
            raise RuntimeError(f"failed to connect to database: {exc}") from exc
        return cls(engine)

    def create_wallet(self, wallet: Wallet) -> Wallet:
        with self._engine.begin() as conn:
            conn.execute(insert(wallets_table).values(id=wallet.id, balance=wallet.balance))
        return Wallet(wallet.id, wallet.balance)

    def get_wallet(self, wallet_id: str) -> Wallet:
        query = select(wallets_table.c.id, wallets_table.c.balance).where(
            wallets_table.c.id == wallet_id
        )
        with self._engine.connect() as conn:
            row = conn.execute(query).first()
        if row is None:
            raise WalletNotFoundError()
        return Wallet(row.id, row.balance)

    def transfer(self, source_id: str, destination_id: str, amount: int) -> None:
        balance = wallets_table.c.balance
        with self._engine.begin() as conn:
            # Rows are locked in a fixed order so concurrent transfers cannot deadlock.
            for wallet_id in sorted((source_id, destination_id)):
                locked = conn.execute(
                    select(wallets_table.c.id)
                    .where(wallets_table.c.id == wallet_id)
                    .with_for_update()
                ).first()
                if locked is None:
                    raise WalletNotFoundError()

            debited = conn.execute(
                update(wallets_table)
                .where(wallets_table.c.id == source_id, balance >= amount)
                .values(balance=balance - amount)
            )
            if debited.rowcount == 0:
                raise InsufficientFundsError()

            conn.execute(
                update(wallets_table)
                .where(wallets_table.c.id == destination_id)
                .values(balance=balance + amount)
            )