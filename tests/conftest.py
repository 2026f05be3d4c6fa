import pytest

from helpers import carved_4x4


@pytest.fixture
def carved_grid():
    return carved_4x4()
