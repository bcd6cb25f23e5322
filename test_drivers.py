import pytest

import pagegenerator
import pagesim
import pagestats
from page_trace import load_trace

BELADY = "1 2 3 4 1 2 5 1 2 3 4 5"


@pytest.fixture
def trace_file(tmp_path):
    path = tmp_path / 'refs.txt'
    path.write_text(BELADY)
    return str(path)


def test_pagesim_prints_steps_and_miss_rate(trace_file, capsys):
    assert pagesim.main(['3', trace_file, 'fifo']) == 0
    out = capsys.readouterr().out
    assert " 4: [ 4| 2| 3] F" in out
    assert "\nMiss Rate = 6 / 9 = 66.67%" in out


def test_pagesim_extra_runs_optimal_policy(trace_file, capsys):
    assert pagesim.main(['3', trace_file, 'extra']) == 0
    assert "Miss Rate = 4 / 9 = 44.44%" in capsys.readouterr().out


@pytest.mark.parametrize('frames', ['0', '101'])
def test_pagesim_rejects_frame_count(trace_file, frames, capsys):
    assert pagesim.main([frames, trace_file, 'lru']) == 1
    assert "Error: range of number of memory frames is [1, 100]" in capsys.readouterr().out


def test_pagesim_rejects_unknown_algorithm(trace_file):
    with pytest.raises(SystemExit):
        pagesim.main(['3', trace_file, 'clock'])


def test_pagesim_missing_file(tmp_path, capsys):
    assert pagesim.main(['3', str(tmp_path / 'missing.txt'), 'lru']) == 1
    assert "Error: cannot open file" in capsys.readouterr().out


def test_pagesim_malformed_trace(tmp_path, capsys):
    path = tmp_path / 'bad.txt'
    path.write_text("1 2 three")
    assert pagesim.main(['2', str(path), 'lru']) == 1
    assert "Error:" in capsys.readouterr().out


def test_pagestats_writes_report(trace_file, tmp_path, capsys):
    report = tmp_path / 'pagerates.txt'
    assert pagestats.main(['3', '4', '1', trace_file, '-o', str(report)]) == 0

    assert report.read_text().splitlines() == [
        "3 4 ",
        "77.78 50.00 ",
        "66.67 75.00 ",
        "44.44 25.00 ",
    ]
    out = capsys.readouterr().out
    assert "LRU,   3 frames: Miss Rate =   7 /   9 = 77.78%" in out
    assert "FIFO,   4 frames: Miss Rate =   6 /   8 = 75.00%" in out
    assert "EXTRA,   4 frames: Miss Rate =   2 /   8 = 25.00%" in out


def test_pagestats_reports_nan_when_frames_never_fill(trace_file, tmp_path):
    report = tmp_path / 'pagerates.txt'
    assert pagestats.main(['5', '6', '1', trace_file, '-o', str(report)]) == 0
    lines = report.read_text().splitlines()
    assert lines[0] == "5 6 "
    assert lines[1].split()[1] == "nan"


@pytest.mark.parametrize('args, message', [
    (['1', '4', '1'], "no less than 2"),
    (['2', '101', '1'], "no more than 100"),
    (['5', '4', '1'], "cannot be more than"),
    (['2', '4', '0'], "positive integer"),
])
def test_pagestats_validates_sweep(trace_file, tmp_path, capsys, args, message):
    report = tmp_path / 'pagerates.txt'
    assert pagestats.main(args + [trace_file, '-o', str(report)]) == 1
    assert message in capsys.readouterr().out
    assert not report.exists()


def test_frame_sweep():
    assert pagestats.frame_sweep(5, 40, 10) == [5, 15, 25, 35]
    assert pagestats.frame_sweep(2, 2, 3) == [2]


def test_pagegenerator_writes_trace(tmp_path):
    path = tmp_path / 'refs.txt'
    assert pagegenerator.main(['10', '50', str(path), '7']) == 0
    pages = load_trace(str(path))
    assert len(pages) == 50
    assert all(a != b for a, b in zip(pages, pages[1:]))

    again = tmp_path / 'again.txt'
    pagegenerator.main(['10', '50', str(again), '7'])
    assert load_trace(str(again)) == pages


def test_pagegenerator_rejects_range(tmp_path, capsys):
    assert pagegenerator.main(['200', '50', str(tmp_path / 'refs.txt')]) == 1
    assert "Error: Page range" in capsys.readouterr().out
