import pytest

from jacks import cli


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)


@pytest.fixture
def strategies_dir(make_strategy, write_strategy, tmp_path):
    write_strategy("default-strategy.json", make_strategy(name="Default"))
    write_strategy("single-deck.json", make_strategy(decks=1, dealer_stands_on_soft_17=True, name="Single Deck"))
    write_strategy("broken.json", "{")
    return tmp_path


def test_lookup_exact(strategies_dir, capsys):
    code = cli.main(["--strategies-dir", str(strategies_dir), "lookup", "hard", "16", "10"])
    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith("H: Hit")
    assert "[single-deck]" in out


def test_lookup_fallback_and_face_card(strategies_dir, capsys):
    code = cli.main(["--strategies-dir", str(strategies_dir), "lookup", "hard", "16", "K", "--decks", "6", "--s17", "no"])
    assert code == 0
    out = capsys.readouterr().out
    assert "default-strategy (no exact match, using fallback)" in out


def test_lookup_error_exit_code(strategies_dir, capsys):
    code = cli.main(["--strategies-dir", str(strategies_dir), "lookup", "soft", "25", "A"])
    assert code == 2
    assert "Invalid soft hand total" in capsys.readouterr().err


def test_list_marks_fallback_and_failures(strategies_dir, capsys):
    assert cli.main(["--strategies-dir", str(strategies_dir), "list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("* default-strategy")
    assert lines[1].startswith("  single-deck")
    assert lines[2].startswith("! broken")


def test_chart(strategies_dir, capsys):
    assert cli.main(["--strategies-dir", str(strategies_dir), "chart", "single-deck"]) == 0
    out = capsys.readouterr().out
    assert "Hard Hands" in out and "Soft Hands" in out and "Pairs" in out
    assert cli.main(["--strategies-dir", str(strategies_dir), "chart", "missing"]) == 1


def test_invalid_deck_range_is_rejected(strategies_dir):
    with pytest.raises(SystemExit):
        cli.main(["--strategies-dir", str(strategies_dir), "--max-decks", "0", "list"])


def test_bad_yes_no_value():
    with pytest.raises(SystemExit):
        cli.main(["lookup", "hard", "16", "10", "--das", "maybe"])
