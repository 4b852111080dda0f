"""Account and transaction records kept by the bank."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

NAME_LIMIT = 29
"""Longest account holder name that is kept; longer names are cut."""


class TransactionType(str, Enum):
    """Kinds of transactions, by the letter used in the ledger file."""

    INTEREST = "J"
    DEPOSIT = "D"
    WITHDRAWAL = "S"
    PAYMENT = "P"
    OPEN = "A"
    CLOSE = "F"


@dataclass
class Account:
    """A checking account. A closed account carries the number -1."""

    number: int
    cpf: int
    name: str
    balance: float = 0.0

    def __post_init__(self) -> None:
        self.name = self.name[:NAME_LIMIT]

    def to_csv_line(self) -> str:
        """Render the account as one line of the accounts file, without newline."""
        return f"{self.number:08d}, {self.cpf}, {self.name}, {self.balance:.2f}"


@dataclass
class Transaction:
    """One entry of the day's ledger."""

    account_number: int
    kind: TransactionType
    amount: float = 0.0

    def to_csv_line(self) -> str:
        """Render the transaction as one line of the ledger file, without newline."""
        return f"{self.account_number:08d}, {self.kind.value}, {self.amount:.2f}"