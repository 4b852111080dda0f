# acme-bank

A small current-account ledger. It keeps a list of accounts and a log of
every operation, loads accounts from a CSV file, and writes balances and
the operation log back to CSV files.

## Installing

```
pip install .
```

## Running a session

```
acme-bank 0
```

The argument is the first command to run; without one, a usage line is
printed and the exit status is 2. After the first command, further
commands are read from standard input until the command `-1` ends the
session. A session begins by printing `EXEC MAIN`; the command `-1`
prints `EXEC FIM`. If input runs out before `-1`, the session ends
quietly. Anything after the command number on its line is ignored.

| Command | What it does | Further input |
|--------:|--------------|---------------|
| `0`  | Load accounts from `contasin.csv`; negative balances are charged 1% interest | none |
| `1`  | Open an account with a zero balance | account number, CPF and name, one per line |
| `2`  | Close an account | account number, CPF and name, one per line (the name is read but not used) |
| `3`  | Print `SALDO <balance>` for an account number | account number |
| `4`  | Print `CONTA <number> - SALDO <balance>` for a CPF | CPF |
| `5`  | Deposit; prints `CONTA <number> - DEP <amount>` | `number amount` |
| `6`  | Withdraw; prints `CONTA <number> - SAQUE <amount>` | `number amount` |
| `7`  | Pay; prints `CONTA <number> - PGTO <amount>` | `number amount` |
| `8`  | Transfer; prints `DA CONTA <origin> PARA CONTA <destination> - TRANSF <amount>` | `origin destination amount` |
| `9`  | Save to `contasout.csv` and `operaout.csv` | none |
| `-1` | End the session | none |

Any other number, or a command that is not a number, prints
`EXEC INVALIDO`. Commands `0` and `9` print `OK` on success and `ERRO` on
failure. Files are read and written in the current directory. Account
numbers are printed with eight digits.

### Number formats

* An account number has eight digits; the last digit is the sum of the
  first seven, modulo 10. Otherwise `ERROCONTA` is printed. This check
  applies to commands 1 to 3; commands 5 to 8 only reject numbers that
  are zero or negative.
* A CPF has eleven digits; the last two, read as a two-digit number, equal
  the sum of the first nine. Otherwise `ERROCPF` is printed.

Operations on an account that does not exist print `ERROINEXISTENTE`.
For a transfer, both accounts are checked and each failure is printed,
with `(O)` or `(D)` appended for the origin or destination. Opening an
account whose number is taken prints `ERRODUPLICADA`.

A closed account keeps its place in the list, with its number set to
`-1`. Closing an account first records its balance being settled: a
payment for a negative balance, a withdrawal for a positive one.

### Files

`contasin.csv` starts with a line giving the number of accounts, followed
by one `number, cpf, name, balance` line per account. Names are kept as
written between the commas and cut to 29 characters. Lines beyond the
declared count are ignored; if there are fewer lines, empty accounts fill
the rest. If the file cannot be opened, accounts already in memory are
kept and the load still succeeds.

`contasout.csv` is written in the same shape, with a `count, 4` header
and balances to two decimal places. `operaout.csv` holds one
`number, type, amount` line per operation, where the type is one of:

* `J` interest, `D` deposit, `S` withdrawal, `P` payment,
  `A` account opened, `F` account closed.

A transfer is logged as a withdrawal from the origin followed by a
deposit to the destination.

## Using it from Python

```python
from acme_bank.bank import Bank, BankError

bank = Bank()
bank.load("contasin.csv")
try:
    bank.deposit(11111117, 100.0)
except BankError as error:
    print(error.codes)
bank.save("contasout.csv", "operaout.csv")
```

`Bank` offers `load`, `open_account`, `close_account`,
`balance_by_number`, `balance_by_cpf`, `locate`, `deposit`, `withdraw`,
`pay`, `transfer` and `save`. A refused operation raises `BankError`,
whose `codes` attribute holds the error codes listed above. The session
itself is `acme_bank.cli.run_session(first_command, stream, out)`.

The lower-level pieces live in `acme_bank.models` (`Account`,
`Transaction`, `TransactionType`), `acme_bank.validation`
(`is_valid_account_number`, `is_valid_cpf`, `parse_int_prefix`) and
`acme_bank.storage` (`read_accounts`, `write_accounts`,
`write_transactions`).

## What it does not do

Amounts are not checked: deposits, withdrawals, payments and transfers
accept any amount, and balances may go negative. Nothing is kept between
sessions except what command `9` writes, and the saved files are not read
back by command `0`, which reads only `contasin.csv`.

## Tests

```
pip install .[test]
pytest
```