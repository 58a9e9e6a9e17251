import pytest

from evenset import __version__
from evenset.cli import main, print_batch


def test_divide(capsys):
    main(["divide", "100", "100", "100", "100", "100"])
    out = capsys.readouterr().out
    assert out == ("Batch #1 : 100 + 100 = 200\n"
                   "Batch #2 : 100 + 100 + 100 = 300\n"
                   "Diff: 100\n\n")

def test_divide_single(capsys):
    main(["divide", "5"])
    out = capsys.readouterr().out
    assert out.splitlines()[:3] == ["Batch #1 : = 0", "Batch #2 : 5 = 5", "Diff: 5"]

def test_divide_random(capsys):
    main(["divide", "--random", "30", "--runs", "4", "--seed", "0"])
    out = capsys.readouterr().out
    assert out.count("Diff: ") == 4
    assert out.count("Batch #1 :") == 4

def test_divide_random_seeded(capsys):
    main(["divide", "--random", "20", "--seed", "42"])
    first = capsys.readouterr().out
    main(["divide", "--random", "20", "--seed", "42"])
    assert capsys.readouterr().out == first

@pytest.mark.requires_solver("ortools")
def test_divide_ortools(capsys):
    main(["divide", "--solver", "ortools", "3", "1", "4", "2", "2"])
    assert "Diff: 0" in capsys.readouterr().out

def test_divide_negative(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["divide", "3", "-5"])
    assert exc.value.code == 1
    assert "negative" in capsys.readouterr().err

def test_divide_unknown_solver(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["divide", "--solver", "nosuchsolver", "1", "2"])
    assert exc.value.code == 2
    err = capsys.readouterr().err
    assert "invalid choice" in err and "nosuchsolver" in err

@pytest.mark.parametrize("argv", [
    ["divide"],
    ["divide", "1", "2", "--random", "5"],
    ["divide", "--random", "5", "--low", "10", "--high", "10"],
    ["divide", "--random", "-1"],
    ["divide", "--random", "3", "--high", str(2**70)],
])
def test_divide_bad_arguments(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2

def test_version(capsys):
    main(["version"])
    out = capsys.readouterr().out
    assert f"evenset version: {__version__}" in out
    assert "dp" in out

def test_print_batch(capsys):
    assert print_batch((4, 5, 6), [0, 2], "Batch #1 :") == 10
    assert capsys.readouterr().out == "Batch #1 : 4 + 6 = 10\n"
