"""The bank's accounts and the day's ledger, with the operations on them."""

from __future__ import annotations

from acme_bank.models import Account, Transaction, TransactionType
from acme_bank.storage import (
    StrPath,
    read_accounts,
    write_accounts,
    write_transactions,
)
from acme_bank.validation import (
    is_valid_account_number,
    is_valid_cpf,
    parse_int_prefix,
)

CLOSED = -1
"""Number carried by an account once it is closed."""


class BankError(Exception):
    """An operation was refused; ``codes`` holds the error codes, in order."""

    def __init__(self, *codes: str) -> None:
        super().__init__("\n".join(codes))
        self.codes: tuple[str, ...] = codes


class Bank:
    """Accounts in memory and the transactions recorded since start-up."""

    def __init__(self) -> None:
        self.accounts: list[Account] = []
        self.transactions: list[Transaction] = []

    def _record(
        self, number: int, kind: TransactionType, amount: float = 0.0
    ) -> Transaction:
        transaction = Transaction(number, kind, amount)
        self.transactions.append(transaction)
        return transaction

    def _find_by_number(self, number: int) -> Account | None:
        return next((acc for acc in self.accounts if acc.number == number), None)

    @staticmethod
    def _check_number(number: str) -> None:
        if not is_valid_account_number(number):
            raise BankError("ERROCONTA")

    @staticmethod
    def _check_cpf(cpf: str) -> None:
        if not is_valid_cpf(cpf):
            raise BankError("ERROCPF")

    def load(self, path: StrPath) -> None:
        """Replace the accounts with those of the file, charging interest.

        If the file cannot be opened the accounts are kept, and the load only
        fails when there are none.
        """
        try:
            accounts, charges = read_accounts(path)
        except OSError:
            if not self.accounts:
                raise BankError("ERRO") from None
            return
        except ValueError:
            self.accounts = []
            raise BankError("ERRO") from None
        self.accounts = accounts
        self.transactions.extend(charges)

    def open_account(self, number: str, cpf: str, name: str) -> Account:
        """Open an account with a zero balance."""
        self._check_number(number)
        self._check_cpf(cpf)
        account_number = parse_int_prefix(number)
        if self._find_by_number(account_number) is not None:
            raise BankError("ERRODUPLICADA")
        account = Account(account_number, parse_int_prefix(cpf), name)
        self.accounts.append(account)
        self._record(account.number, TransactionType.OPEN)
        return account

    def close_account(self, number: str, cpf: str) -> Account:
        """Settle and close an account; it keeps its place, numbered -1."""
        self._check_number(number)
        self._check_cpf(cpf)
        account = self._find_by_number(parse_int_prefix(number))
        if account is None:
            raise BankError("ERROINEXISTENTE")
        if account.balance < 0:
            self._record(account.number, TransactionType.PAYMENT, -account.balance)
        elif account.balance > 0:
            self._record(account.number, TransactionType.WITHDRAWAL, account.balance)
        account.number = CLOSED
        self._record(account.number, TransactionType.CLOSE)
        return account

    def balance_by_number(self, number: str) -> float:
        """Balance of the account with this number."""
        self._check_number(number)
        account = self._find_by_number(parse_int_prefix(number))
        if account is None:
            raise BankError("ERROINEXISTENTE")
        return account.balance

    def balance_by_cpf(self, cpf: str) -> Account:
        """The first account held under this CPF."""
        self._check_cpf(cpf)
        wanted = parse_int_prefix(cpf)
        account = next((acc for acc in self.accounts if acc.cpf == wanted), None)
        if account is None:
            raise BankError("ERROINEXISTENTE")
        return account

    def locate(self, number: int, role: str = "") -> Account:
        """The account with this number; ``role`` is appended to error codes."""
        if number <= 0:
            raise BankError(f"ERROCONTA{role}")
        account = self._find_by_number(number)
        if account is None:
            raise BankError(f"ERROINEXISTENTE{role}")
        return account

    def deposit(self, number: int, amount: float) -> Transaction:
        """Add ``amount`` to the account."""
        account = self.locate(number)
        account.balance += amount
        return self._record(number, TransactionType.DEPOSIT, amount)

    def withdraw(self, number: int, amount: float) -> Transaction:
        """Take ``amount`` out of the account."""
        account = self.locate(number)
        account.balance -= amount
        return self._record(number, TransactionType.WITHDRAWAL, amount)

    def pay(self, number: int, amount: float) -> Transaction:
        """Pay ``amount`` out of the account."""
        account = self.locate(number)
        account.balance -= amount
        return self._record(number, TransactionType.PAYMENT, amount)

    def transfer(
        self, origin: int, destination: int, amount: float
    ) -> tuple[Transaction, Transaction]:
        """Move ``amount`` between accounts, recorded as a withdrawal and a deposit."""
        errors: list[str] = []
        found: list[Account] = []
        for number, role in ((origin, "(O)"), (destination, "(D)")):
            try:
                found.append(self.locate(number, role))
            except BankError as error:
                errors.extend(error.codes)
        if errors:
            raise BankError(*errors)
        source, target = found
        source.balance -= amount
        target.balance += amount
        return (
            self._record(origin, TransactionType.WITHDRAWAL, amount),
            self._record(destination, TransactionType.DEPOSIT, amount),
        )

    def save(self, accounts_path: StrPath, transactions_path: StrPath) -> None:
        """Write the accounts file and then the ledger file."""
        try:
            write_accounts(accounts_path, self.accounts)
            write_transactions(transactions_path, self.transactions)
        except OSError:
            raise BankError("ERRO") from None