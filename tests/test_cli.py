import pytest

from algodrills.arrays import kth_max_min
from algodrills.cli import main
from algodrills.numbers import primes_up_to
from algodrills.patterns import diamond


def test_primes_command(capsys):
    assert main(["primes", "30"]) == 0
    out = capsys.readouterr().out
    assert out.split() == [str(p) for p in primes_up_to(30)]


@pytest.mark.parametrize("number, answer", [("121", "Yes"), ("123", "No")])
def test_palindrome_command(capsys, number, answer):
    assert main(["palindrome", number]) == 0
    assert capsys.readouterr().out.strip() == answer


def test_kth_command(capsys):
    values = [7, 3, 9, 1, 5]
    assert main(["kth", "2", *map(str, values)]) == 0
    largest, smallest = kth_max_min(values, 2)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"2 th Max : {largest}", f"2 th Min : {smallest}"]


def test_kth_rejects_out_of_range(capsys):
    with pytest.raises(SystemExit) as info:
        main(["kth", "4", "1", "2"])
    assert info.value.code == 2


def test_diamond_command(capsys):
    assert main(["diamond", "4"]) == 0
    assert capsys.readouterr().out.splitlines() == diamond(4)


def test_missing_command_exits():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2