import sys

import pytest

from symderiv import cli, driver
from symderiv.expr import d


def test_main(capsys):
    assert cli.main(["2"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3
    assert out[0] == "D((x^x)) = ((x^x) * ((x * (x^-1)) + ln(x)))"
    assert out[1].startswith("D(((x^x) * ")
    assert out[2].isdigit()

def test_main_zero(capsys):
    assert cli.main(["0"]) == 0
    assert capsys.readouterr().out == "2\n"

def test_main_other_variable(capsys):
    assert cli.main(["1", "--var", "t", "--minimal"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["D(t^t) = t^t*(t*t^-1 + ln(t))", "6"]

@pytest.mark.parametrize("argv", [
    [],
    ["abc"],
    ["1.5"],
    ["-1"],
    ["1", "--recursion-limit", "0"],
    ["1", "--recursion-limit", "5"],
    ["1", "--recursion-limit", "99"],
])
def test_invalid_argument(argv, capsys):
    limit = sys.getrecursionlimit()
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    assert exc_info.value.code == 2
    assert "invalid argument" in capsys.readouterr().err
    assert sys.getrecursionlimit() == limit

def test_plot_reuses_single_run(monkeypatch, tmp_path):
    calls = []
    plotted = []

    def counting_d(name, expr):
        calls.append(name)
        return d(name, expr)

    monkeypatch.setattr(driver, "d", counting_d)
    monkeypatch.setattr(cli, "plot_growth", lambda counts, path: plotted.append(counts))
    assert cli.main(["3", "--plot", str(tmp_path / "growth.png")]) == 0
    assert len(calls) == 3
    assert len(plotted) == 1
    assert plotted[0][:2] == [2, 6]
    assert len(plotted[0]) == 4

def test_plot(tmp_path, capsys):
    path = tmp_path / "growth.png"
    assert cli.main(["3", "--plot", str(path)]) == 0
    assert path.exists()

def test_recursion_error(monkeypatch):
    def boom(*args, **kwargs):
        raise RecursionError

    monkeypatch.setattr(cli, "run", boom)
    assert cli.main(["5"]) == 1

def test_config_from_args():
    args = cli.build_parser().parse_args(["4", "--threshold", "10", "--recursion-limit", "5000"])
    config = cli.config_from_args(args)
    assert config.iterations == 4
    assert config.var == "x"
    assert config.elide_threshold == 10
    assert config.recursion_limit == 5000
    assert config.plot_path is None
