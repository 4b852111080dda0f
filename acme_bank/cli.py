"""Interactive teller session driven by numbered commands."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import TextIO

from acme_bank.bank import Bank, BankError
from acme_bank.validation import parse_int_prefix

ACCOUNTS_IN = "contasin.csv"
ACCOUNTS_OUT = "contasout.csv"
TRANSACTIONS_OUT = "operaout.csv"

_WORD_AND_REST = re.compile(r"(\S+)(.*)", re.DOTALL)
_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class _Input:
    """Reads whole lines or whitespace-separated words from one stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: str | None = None

    def _next_line(self) -> str | None:
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line
        line = self._stream.readline()
        return line or None

    def read_line(self) -> str:
        line = self._next_line()
        return "" if line is None else line.rstrip("\n")

    def read_word(self) -> str:
        while True:
            line = self._next_line()
            if line is None:
                raise EOFError
            match = _WORD_AND_REST.match(line.lstrip())
            if match is None:
                continue
            word, rest = match.groups()
            self._pending = rest or None
            return word

    def read_int(self) -> int:
        return parse_int_prefix(self.read_word())

    def read_float(self) -> float:
        match = _FLOAT.match(self.read_word())
        return float(match.group()) if match else 0.0

    def read_command(self) -> int | None:
        """Read a command number and drop the rest of its line."""
        word = self.read_word()
        self._pending = None
        match = _INT.match(word)
        return int(match.group()) if match else None


def _run_command(command: int, bank: Bank, source: _Input, out: TextIO) -> None:
    def say(text: str) -> None:
        out.write(text + "\n")

    try:
        if command == 0:
            bank.load(ACCOUNTS_IN)
            say("OK")
        elif command == 1:
            number, cpf, name = (source.read_line() for _ in range(3))
            bank.open_account(number, cpf, name)
        elif command == 2:
            number, cpf, _name = (source.read_line() for _ in range(3))
            bank.close_account(number, cpf)
        elif command == 3:
            say(f"SALDO {bank.balance_by_number(source.read_line()):.2f}")
        elif command == 4:
            account = bank.balance_by_cpf(source.read_line())
            say(f"CONTA {account.number:08d} - SALDO {account.balance:.2f}")
        elif command in (5, 6, 7):
            number = source.read_int()
            amount = source.read_float()
            operation, label = {
                5: (bank.deposit, "DEP"),
                6: (bank.withdraw, "SAQUE"),
                7: (bank.pay, "PGTO"),
            }[command]
            operation(number, amount)
            say(f"CONTA {number:08d} - {label} {amount:.2f}")
        elif command == 8:
            origin = source.read_int()
            destination = source.read_int()
            amount = source.read_float()
            bank.transfer(origin, destination, amount)
            say(
                f"DA CONTA {origin:08d} PARA CONTA {destination:08d}"
                f" - TRANSF {amount:.2f}"
            )
        elif command == 9:
            bank.save(ACCOUNTS_OUT, TRANSACTIONS_OUT)
            say("OK")
        else:
            say("EXEC INVALIDO")
    except BankError as error:
        for code in error.codes:
            say(code)


def run_session(first_command: int, stream: TextIO, out: TextIO) -> int:
    """Run commands, the first given and the rest read from ``stream``, until -1."""
    out.write("EXEC MAIN\n")
    bank = Bank()
    source = _Input(stream)
    command: int | None = first_command
    try:
        while True:
            if command == -1:
                out.write("EXEC FIM\n")
                return 0
            if command is None:
                out.write("EXEC INVALIDO\n")
            else:
                _run_command(command, bank, source, out)
            command = source.read_command()
    except EOFError:
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start a session whose first command is the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write("usage: acme-bank COMMAND\n")
        return 2
    return run_session(parse_int_prefix(args[0]), sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())