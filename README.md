# walletsvc

A small HTTP service that keeps wallets with integer balances and moves
money between them. Wallets live either in memory (sharded across locked
segments, safe under concurrent transfers) or in a `wallets` table in a
MySQL database.

## Install

    pip install .

## Run

    walletsvc

The command loads the configuration, builds the repository and serves the
API with Flask's built-in server on `0.0.0.0`, port 8080 by default. It
exits with status 1 if the configuration cannot be read or the repository
cannot be created.

## HTTP API

| Method | Path            | Body                                                           | Success                             |
|--------|-----------------|----------------------------------------------------------------|-------------------------------------|
| POST   | `/wallets`      | none                                                           | `201` `{"id": "w_1", "balance": 0}` |
| GET    | `/wallets/<id>` | none                                                           | `200` `{"id": "w_1", "balance": 0}` |
| POST   | `/transfer`     | `{"source_id": "...", "destination_id": "...", "amount": 100}` | `200` `{"status": "success"}`       |

Wallet identifiers are handed out in sequence: `w_1`, `w_2`, ...

Errors come back as `{"error": "<message>"}`:

- `400` for a body that is not a JSON object, a missing or empty
  `source_id` or `destination_id`, an `amount` that is missing, not an
  integer or not greater than zero, a transfer to the same wallet, or
  insufficient funds;
- `404` when a wallet does not exist;
- `500` for anything else.

## Configuration

`walletsvc.config.load()` starts from the defaults below, then reads the
first of `config.yaml`, `config.yml` or `config` found in `.`, `./config`
and `/etc/wallet_service/` (a missing file is fine), then applies
environment variables.

```yaml
server:
  port: 8080
repository:
  type: memory        # or "mysql"
  segment_count: 64
database:
  host: localhost
  port: 3306
  user: root
  password: ""
  dbname: wallet
```

Environment variables override the file; empty values are ignored:

- `PORT` or `WALLET_SERVER_PORT` for the server port;
- `WALLET_REPOSITORY_TYPE`, `WALLET_REPOSITORY_SEGMENT_COUNT`;
- `WALLET_DATABASE_HOST`, `WALLET_DATABASE_PORT`, `WALLET_DATABASE_USER`,
  `WALLET_DATABASE_PASSWORD`, `WALLET_DATABASE_DBNAME`.

An unreadable file or a value that does not parse raises
`walletsvc.config.ConfigError`. An unknown repository type makes
`RepoFactory.get_repository` raise `ValueError`.

The `mysql` repository connects through SQLAlchemy's `mysql+pymysql`
dialect, so the PyMySQL driver must be installed alongside the package to
use it; the table is created on first connection.

## Use as a library

```python
from walletsvc.ids import Generator
from walletsvc.memory_repo import MemoryRepo
from walletsvc.service import WalletService
from walletsvc.domain import InsufficientFundsError

repo = MemoryRepo(32)
service = WalletService(repo, Generator())
a = service.create_wallet()
b = service.create_wallet()
try:
    service.transfer(a.id, b.id, 100)
except InsufficientFundsError:
    print("no funds yet")

repo.set_balance(a.id, 1000)
service.transfer(a.id, b.id, 100)
print(service.get_wallet(b.id).balance)  # 100
```

Failures are raised as subclasses of `walletsvc.domain.WalletError`:
`WalletNotFoundError`, `InsufficientFundsError`, `InvalidAmountError` and
`SameWalletError`.

`walletsvc.web.create_app(service)` returns a Flask application serving
the API above, and `walletsvc.server.build_app(config)` builds one from a
loaded `walletsvc.config.Config`. `walletsvc.sql_repo.SQLRepo` can also be
constructed directly from any SQLAlchemy engine.

## What it does not do

There is no endpoint for depositing or withdrawing funds: new wallets
start at zero, and balances can only be set through the library
(`MemoryRepo.set_balance`, or `create_wallet` with a non-zero balance).
The in-memory repository keeps nothing once the process exits.

## Tests

    pip install .[test]
    pytest