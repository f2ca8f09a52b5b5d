import pytest

from workbench.gcd import gcd, gcd_all, main


def test_gcd_coprime():
    assert gcd(14, 15) == 1


def test_gcd_shared_factors():
    assert gcd(2 * 3 * 5 * 11 * 17, 3 * 7 * 11 * 13 * 19) == 3 * 11


def test_gcd_is_symmetric():
    assert gcd(84, 36) == gcd(36, 84)


@pytest.mark.parametrize("n, m", [(0, 5), (5, 0), (0, 0)])
def test_gcd_rejects_zero(n, m):
    with pytest.raises(ValueError):
        gcd(n, m)


def test_gcd_all_matches_pairwise():
    assert gcd_all([2 * 3 * 5 * 11 * 17, 3 * 7 * 11 * 13 * 19]) == 3 * 11


def test_gcd_all_single_value():
    assert gcd_all([42]) == 42


def test_gcd_all_empty():
    with pytest.raises(ValueError):
        gcd_all([])


def test_main_prints_result(capsys):
    assert main(["14", "15"]) == 0
    out = capsys.readouterr().out
    assert out == "The greatest common divisor of [14, 15] is 1\n"


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage: gcd NUMBER ..." in capsys.readouterr().err


@pytest.mark.parametrize("bad", ["abc", "-3", "1.5", " 4", str(2**64)])
def test_main_rejects_bad_numbers(bad, capsys):
    assert main([bad]) == 1
    assert "error parsing argument" in capsys.readouterr().err