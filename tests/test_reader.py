import logging

import numpy as np
import pandas as pd
import pytest

from fars.data.reader import make_filename, fars_read, fars_read_years, read_year


def test_make_filename():
    assert make_filename(2015) == "accident_2015.csv.bz2"


@pytest.mark.parametrize("year", ["2015", 2015.0, np.int64(2015)])
def test_make_filename_coerces_year(year):
    assert make_filename(year) == "accident_2015.csv.bz2"


def test_make_filename_rejects_non_numeric():
    with pytest.raises(ValueError):
        make_filename("last year")


def test_fars_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="does not exist"):
        fars_read(tmp_path / "accident_1900.csv.bz2")


def test_fars_read_returns_dataframe(fars_dir, monkeypatch):
    monkeypatch.chdir(fars_dir)
    df = fars_read("accident_2013.csv.bz2")

    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["ST_CASE", "MONTH", "STATE", "LONGITUD", "LATITUDE"]
    assert len(df) == 5
    # loaded verbatim, sentinels untouched
    assert df["LONGITUD"].max() == pytest.approx(999.9999)


def test_fars_read_years_keeps_month_and_year(fars_dir):
    result = fars_read_years([2013, 2014], data_dir=fars_dir)

    assert len(result) == 2
    first, second = result
    assert list(first.columns) == ["MONTH", "year"]
    assert (first["year"] == 2013).all()
    assert first["MONTH"].tolist() == [1, 1, 2, 2, 3]
    assert (second["year"] == 2014).all()


def test_fars_read_years_isolates_bad_year(fars_dir, caplog):
    caplog.set_level(logging.WARNING, logger="fars")
    result = fars_read_years([2013, 2099], data_dir=fars_dir)

    assert len(result) == 2
    assert list(result[0].columns) == ["MONTH", "year"]
    assert result[1] is None
    assert "invalid year: 2099" in caplog.text


def test_fars_read_years_non_numeric_year(fars_dir, caplog):
    caplog.set_level(logging.WARNING, logger="fars")
    result = fars_read_years(["abc", 2014], data_dir=fars_dir)

    assert result[0] is None
    assert result[1] is not None
    assert "invalid year: abc" in caplog.text


def test_fars_read_years_defaults_to_cwd(fars_dir, monkeypatch):
    monkeypatch.chdir(fars_dir)
    result = fars_read_years(["2014"])

    assert result[0]["year"].tolist() == [2014, 2014, 2014]


def test_read_year_masks_sentinels(fars_dir):
    df = read_year(2013, data_dir=fars_dir)

    assert df["LONGITUD"].isna().sum() == 2
    assert df["LATITUDE"].isna().sum() == 1
    assert df["LONGITUD"].max() < 900


def test_read_year_missing(fars_dir):
    with pytest.raises(FileNotFoundError):
        read_year(1999, data_dir=fars_dir)


def test_fars_read_years_missing_month_column(fars_dir, caplog):
    caplog.set_level(logging.WARNING, logger="fars")
    result = fars_read_years([2012, 2013], data_dir=fars_dir)

    assert result[0] is None
    assert list(result[1].columns) == ["MONTH", "year"]
    assert "invalid year: 2012" in caplog.text


def test_fars_read_years_single_year_string(fars_dir, caplog):
    caplog.set_level(logging.WARNING, logger="fars")
    result = fars_read_years("2013", data_dir=fars_dir)

    assert len(result) == 1
    assert (result[0]["year"] == 2013).all()
    assert "invalid year" not in caplog.text


def test_fars_read_years_single_year_int(fars_dir):
    result = fars_read_years(2014, data_dir=fars_dir)

    assert len(result) == 1
    assert len(result[0]) == 3


def test_fars_read_directory_is_not_a_file(tmp_path):
    (tmp_path / "accident_2013.csv.bz2").mkdir()

    with pytest.raises(FileNotFoundError, match="does not exist"):
        fars_read(tmp_path / "accident_2013.csv.bz2")
