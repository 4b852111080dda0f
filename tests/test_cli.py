import io

import pytest

from acme_bank import cli

ACCOUNTS_FILE = (
    "3, 4\n"
    "00001113, 12345678945, Fulano da Silva, 0.00\n"
    "00002226, 98765432145, Fulana da Silva, 1.00\n"
    "00003339, 11122233318, John Doe, -1.00\n"
)


def run(first, text):
    out = io.StringIO()
    code = cli.run_session(first, io.StringIO(text), out)
    return code, out.getvalue().splitlines()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def loaded(workdir):
    (workdir / cli.ACCOUNTS_IN).write_text(ACCOUNTS_FILE, encoding="utf-8")
    return workdir


def test_exit_immediately():
    code, lines = run(-1, "")
    assert code == 0
    assert lines == ["EXEC MAIN", "EXEC FIM"]


def test_unknown_command():
    _, lines = run(42, "-1\n")
    assert lines == ["EXEC MAIN", "EXEC INVALIDO", "EXEC FIM"]


def test_non_numeric_command_is_invalid():
    _, lines = run(-1 + 43, "abc\n-1\n")
    assert lines.count("EXEC INVALIDO") == 2


def test_end_of_input_stops_without_goodbye():
    code, lines = run(42, "")
    assert code == 0
    assert "EXEC FIM" not in lines


def test_load_missing_file_fails(workdir):
    _, lines = run(0, "-1\n")
    assert lines == ["EXEC MAIN", "ERRO", "EXEC FIM"]


def test_load_and_balance_by_number(loaded):
    _, lines = run(0, "3\n00002226\n3\n00003339\n-1\n")
    assert lines == ["EXEC MAIN", "OK", "SALDO 1.00", "SALDO -1.01", "EXEC FIM"]


def test_balance_by_cpf(loaded):
    _, lines = run(0, "4\n98765432145\n-1\n")
    assert lines[2] == "CONTA 00002226 - SALDO 1.00"


def test_balance_errors(loaded):
    _, lines = run(0, "3\n00002227\n4\n98765432146\n3\n00005555\n-1\n")
    assert lines[2:5] == ["ERROCONTA", "ERROCPF", "ERROINEXISTENTE"]


def test_open_account_then_query(workdir):
    _, lines = run(1, "00004442\n11111111109\nNova\n3\n00004442\n-1\n")
    assert lines == ["EXEC MAIN", "SALDO 0.00", "EXEC FIM"]


def test_open_duplicate_and_invalid(workdir):
    text = (
        "00004442\n11111111109\nNova\n"
        "1\n00004442\n11111111109\nOutra\n"
        "1\n00004443\n11111111109\nOutra\n"
        "-1\n"
    )
    _, lines = run(1, text)
    assert lines[1:3] == ["ERRODUPLICADA", "ERROCONTA"]


def test_deposit_and_withdraw(workdir):
    text = "00004442\n11111111109\nNova\n5\n00004442 10.5\n6\n4442\n2\n3\n00004442\n-1\n"
    _, lines = run(1, text)
    assert lines[1] == "CONTA 00004442 - DEP 10.50"
    assert lines[2].startswith("CONTA 00004442 - SAQUE ")
    assert lines[3] == "SALDO 8.50"


def test_payment_arguments_may_span_lines(workdir):
    text = "00004442\n11111111109\nNova\n7\n4442\n\n3\n-1\n"
    _, lines = run(1, text)
    assert lines[1] == "CONTA 00004442 - PGTO 3.00"


def test_deposit_errors(workdir):
    _, lines = run(5, "0 1\n5\n12 1\n-1\n")
    assert lines[1:3] == ["ERROCONTA", "ERROINEXISTENTE"]


def test_transfer_errors_for_both_sides(workdir):
    _, lines = run(8, "0 99 1\n-1\n")
    assert lines[1:3] == ["ERROCONTA(O)", "ERROINEXISTENTE(D)"]


def test_transfer_moves_money(loaded):
    text = "8\n00001113 00002226 0.5\n3\n00001113\n3\n00002226\n-1\n"
    _, lines = run(0, text)
    assert lines[2] == "DA CONTA 00001113 PARA CONTA 00002226 - TRANSF 0.50"
    assert lines[3:5] == ["SALDO -0.50", "SALDO 1.50"]


def test_close_account(loaded):
    text = "2\n00002226\n98765432145\nFulana\n3\n00002226\n-1\n"
    _, lines = run(0, text)
    assert lines[2] == "ERROINEXISTENTE"


def test_save_writes_both_files(workdir):
    text = "00004442\n11111111109\nNova\n5\n00004442 10.5\n9\n-1\n"
    _, lines = run(1, text)
    assert lines[-2] == "OK"
    accounts = (workdir / cli.ACCOUNTS_OUT).read_text(encoding="utf-8").splitlines()
    assert accounts[0] == "1, 4"
    assert accounts[1] == "00004442, 11111111109, Nova, 10.50"
    ledger = (workdir / cli.TRANSACTIONS_OUT).read_text(encoding="utf-8").splitlines()
    assert ledger == ["00004442, A, 0.00", "00004442, D, 10.50"]


def test_main_runs_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli.main(["-1"]) == 0
    assert capsys.readouterr().out == "EXEC MAIN\nEXEC FIM\n"


def test_main_without_command(capsys):
    assert cli.main([]) == 2
    assert "usage" in capsys.readouterr().err