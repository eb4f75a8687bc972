import pytest

from fixed8.demo import arithmetic_demo, conversion_demo, main, raw_bits_demo
from fixed8.fixed import Fixed


def test_raw_bits_demo_reports_zero_for_every_copy():
    assert raw_bits_demo() == ["0", "0", "0"]


def test_conversion_demo_has_float_then_integer_lines():
    lines = conversion_demo()
    assert len(lines) == 8
    assert [line.split()[0] for line in lines] == ["a", "b", "c", "d"] * 2
    assert all(line.endswith(" as integer") for line in lines[4:])
    assert not any(line.endswith(" as integer") for line in lines[:4])


def test_conversion_demo_values_match_fixed():
    lines = conversion_demo()
    assert lines[0] == f"a is {Fixed(1234.4321)}"
    assert lines[1] == f"b is {Fixed(10)}"
    assert lines[2] == f"c is {Fixed(42.42)}"
    assert lines[3] == lines[1].replace("b", "d", 1)
    assert lines[5] == "b is 10 as integer"
    assert lines[6] == f"c is {Fixed(42.42).to_int()} as integer"
    assert lines[7] == lines[5].replace("b", "d", 1)


def test_arithmetic_demo_increments_by_smallest_step():
    lines = arithmetic_demo()
    assert len(lines) == 7
    assert lines[0] == str(Fixed())
    assert lines[1] == str(Fixed.from_raw(1))
    assert lines[1] == lines[2] == lines[3]
    assert lines[4] == str(Fixed.from_raw(2))


def test_arithmetic_demo_max_is_the_product():
    lines = arithmetic_demo()
    assert lines[5] == str(Fixed(5.05) * Fixed(2))
    assert lines[6] == lines[5]
    assert lines[5] == "10.1016"


def test_main_runs_all_demos_in_order(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == raw_bits_demo() + conversion_demo() + arithmetic_demo()


@pytest.mark.parametrize(
    "name, demo",
    [("raw", raw_bits_demo), ("conversion", conversion_demo), ("arithmetic", arithmetic_demo)],
)
def test_main_runs_selected_demo(capsys, name, demo):
    assert main([name]) == 0
    assert capsys.readouterr().out.splitlines() == demo()


def test_main_rejects_unknown_demo(capsys):
    with pytest.raises(SystemExit) as info:
        main(["nonsense"])
    assert info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err