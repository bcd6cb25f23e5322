import math

import matplotlib
matplotlib.use('Agg')

import pytest

from generate_graphs import main, plot_miss_rates, read_rates

REPORT = "3 4 \n77.78 50.00 \n66.67 75.00 \n44.44 nan \n"


@pytest.fixture
def report(tmp_path):
    path = tmp_path / 'pagerates.txt'
    path.write_text(REPORT)
    return str(path)


def test_read_rates(report):
    frames, rates = read_rates(report)
    assert frames == [3, 4]
    assert rates['LRU'] == [77.78, 50.0]
    assert rates['FIFO'] == [66.67, 75.0]
    assert rates['OPT'][0] == 44.44
    assert math.isnan(rates['OPT'][1])


def test_read_rates_rejects_short_row(tmp_path):
    path = tmp_path / 'pagerates.txt'
    path.write_text("3 4 5 \n77.78 50.00 \n")
    with pytest.raises(ValueError):
        read_rates(str(path))


def test_plot_miss_rates(report, tmp_path):
    output = tmp_path / 'rates.png'
    frames, rates = read_rates(report)
    plot_miss_rates(frames, rates, str(output))
    assert output.stat().st_size > 0


def test_main_missing_report(tmp_path, capsys):
    assert main([str(tmp_path / 'missing.txt')]) == 1
    assert "Error: cannot open file" in capsys.readouterr().out
