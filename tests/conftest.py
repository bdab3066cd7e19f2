import pytest

from solidfill.models.fill_model import RGBColor


@pytest.fixture
def red():
    return RGBColor(255, 0, 0)
