"""Reading the accounts file and writing the end-of-day files."""

from __future__ import annotations

import re
from collections.abc import Iterable
from os import PathLike
from typing import Union

from acme_bank.models import Account, Transaction, TransactionType
from acme_bank.validation import parse_int_prefix

StrPath = Union[str, "PathLike[str]"]

INTEREST_RATE = 0.01
ACCOUNT_COLUMNS = 4

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _parse_float_prefix(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _parse_account(line: str) -> Account:
    fields = [field for field in line.split(",") if field]
    if len(fields) < ACCOUNT_COLUMNS:
        raise ValueError(f"malformed account line: {line!r}")
    number, cpf, name, balance = fields[:ACCOUNT_COLUMNS]
    return Account(
        number=parse_int_prefix(number),
        cpf=parse_int_prefix(cpf),
        name=name,
        balance=_parse_float_prefix(balance),
    )


def read_accounts(path: StrPath) -> tuple[list[Account], list[Transaction]]:
    """Load accounts, charging 1% interest on negative balances.

    The first line gives the number of accounts. Returns the accounts and the
    interest transactions charged while loading. Missing lines become empty
    accounts; lines beyond the declared count are ignored.
    """
    with open(path, encoding="utf-8") as handle:
        count = parse_int_prefix(handle.readline())
        if count <= 0:
            raise ValueError(f"{path}: no accounts declared")
        accounts: list[Account] = []
        charges: list[Transaction] = []
        for raw in handle:
            if len(accounts) == count:
                break
            line = raw.rstrip("\n")
            if not line.strip():
                continue
            account = _parse_account(line)
            if account.balance < 0:
                interest = account.balance * INTEREST_RATE
                account.balance += interest
                charges.append(
                    Transaction(account.number, TransactionType.INTEREST, interest)
                )
            accounts.append(account)
    accounts.extend(Account(0, 0, "") for _ in range(count - len(accounts)))
    return accounts, charges


def write_accounts(path: StrPath, accounts: Iterable[Account]) -> None:
    """Write the accounts file: a count header, then one account per line."""
    rows = list(accounts)
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(f"{len(rows)}, {ACCOUNT_COLUMNS}\n")
        handle.writelines(f"{account.to_csv_line()}\n" for account in rows)


def write_transactions(path: StrPath, transactions: Iterable[Transaction]) -> None:
    """Write the ledger file, one transaction per line."""
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.writelines(f"{tx.to_csv_line()}\n" for tx in transactions)