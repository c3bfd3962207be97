from datetime import datetime

import pytest
from pytz import utc

from nightdome.models import Observer, Viewport


@pytest.fixture
def j2000():
    """2000-01-01T12:00:00 UTC, epoch day 0."""
    return datetime(2000, 1, 1, 12, 0, tzinfo=utc)


@pytest.fixture
def equator_observer():
    return Observer(lat=0.0, lng=0.0)


@pytest.fixture
def busan_observer():
    return Observer(lat=35.17, lng=129.07)


@pytest.fixture
def viewport():
    return Viewport(width=800, height=600)
