import pytest

from geotargets.config import get_settings

HEADER = "Criteria ID,Name,Canonical Name,Parent ID,Country Code,Target Type,Status"

SAMPLE_ROWS = [
    '"2840","United States","United States","","US","Country","Active"',
    '"21176","Texas","Texas,United States","2840","US","State","Active"',
    '"1006004","Paris","Paris,Texas,United States","21176","US","City","Active"',
    '"9061288","75001","75001,Ile-de-France,France","20321","FR","Postal Code","Active"',
    '"2016","Guam","Guam","","GU","Territory","Active"',
    '"20006","Kent","Kent,United Kingdom","2826","GB","County","Active"',
    '"200501","Abilene-Sweetwater TX","Abilene-Sweetwater TX,Texas,United States","21176","US","DMA Region","Active"',
]


def build_dataset(rows, header=HEADER, newline="\n"):
    return newline.join([header, *rows]) + newline


@pytest.fixture
def sample_dataset():
    return build_dataset(SAMPLE_ROWS)


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_dataset():
    return build_dataset
