import pytest

from fars.cli import main


def test_summarize_prints_table(fars_dir, capsys):
    main(["summarize", "--data-dir", str(fars_dir), "--years", "2013", "2014"])

    out = capsys.readouterr().out
    assert "2013" in out
    assert "2014" in out


def test_summarize_writes_csv(fars_dir, tmp_path):
    out_path = tmp_path / "out" / "summary.csv"
    main(["summarize", "--data-dir", str(fars_dir), "--years", "2013", "--output", str(out_path)])

    assert out_path.read_text().splitlines()[0] == "MONTH,2013"


def test_summarize_nothing_loaded(fars_dir, capsys):
    main(["summarize", "--data-dir", str(fars_dir), "--years", "1980"])

    assert "No data loaded" in capsys.readouterr().out


def test_map_writes_html(fars_dir, tmp_path):
    out_path = tmp_path / "al.html"
    main([
        "map", "--data-dir", str(fars_dir),
        "--state", "1", "--year", "2013", "--output", str(out_path),
    ])

    assert out_path.exists()


def test_map_invalid_state_exits(fars_dir, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["map", "--data-dir", str(fars_dir), "--state", "99", "--year", "2013"])

    assert exc_info.value.code == 1
    assert "invalid STATE number: 99" in capsys.readouterr().err


def test_map_no_accidents(fars_dir, capsys):
    main(["map", "--data-dir", str(fars_dir), "--state", "2", "--year", "2013", "--output", "unused.html"])

    assert "No accidents to plot" in capsys.readouterr().out


def test_report(fars_dir, tmp_path, capsys):
    out_dir = tmp_path / "reports"
    main([
        "--log-json", "report", "--data-dir", str(fars_dir),
        "--years", "2013", "2014", "--states", "1", "6",
        "--output-dir", str(out_dir),
    ])

    names = sorted(p.name for p in out_dir.iterdir())
    assert names == [
        "state_01_2013.html",
        "state_01_2014.html",
        "state_06_2013.html",
        "state_06_2014.html",
        "summary_2013-2014.csv",
    ]
    assert "5 file(s) written" in capsys.readouterr().out
