import logging

import pandas as pd
import pytest


ACCIDENTS_2013 = pd.DataFrame(
    {
        "ST_CASE":  [10001, 10002, 10003, 60001, 10004],
        "MONTH":    [1, 1, 2, 2, 3],
        "STATE":    [1, 1, 1, 6, 1],
        "LONGITUD": [-86.5, 999.9999, -87.0, -120.0, 999.9999],
        "LATITUDE": [32.5, 99.9999, 33.0, 37.0, 33.2],
    }
)

ACCIDENTS_2014 = pd.DataFrame(
    {
        "ST_CASE":  [60002, 60003, 10005],
        "MONTH":    [1, 1, 12],
        "STATE":    [6, 6, 1],
        "LONGITUD": [-118.2, -121.5, -86.8],
        "LATITUDE": [34.0, 38.5, 33.5],
    }
)


# Year file lacking the MONTH column
ACCIDENTS_2012 = pd.DataFrame(
    {
        "ST_CASE":  [10010, 10011],
        "STATE":    [1, 1],
        "LONGITUD": [-86.1, -86.2],
        "LATITUDE": [32.1, 32.2],
    }
)

ACCIDENTS_2015 = pd.DataFrame(
    {
        "ST_CASE":  [430001, 430002, 10020],
        "MONTH":    [4, 5, 5],
        "STATE":    [43, 43, 1],
        "LONGITUD": [-66.1, -67.1, -86.3],
        "LATITUDE": [18.4, 18.2, 32.3],
    }
)


@pytest.fixture
def fars_dir(tmp_path):
    """Directory holding accident_2012 to accident_2015 .csv.bz2 files."""
    ACCIDENTS_2012.to_csv(tmp_path / "accident_2012.csv.bz2", index=False)
    ACCIDENTS_2013.to_csv(tmp_path / "accident_2013.csv.bz2", index=False)
    ACCIDENTS_2014.to_csv(tmp_path / "accident_2014.csv.bz2", index=False)
    ACCIDENTS_2015.to_csv(tmp_path / "accident_2015.csv.bz2", index=False)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_fars_logger():
    """Drop handlers installed by the CLI so they do not leak between tests."""
    yield
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
