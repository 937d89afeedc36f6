"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Path data taken from common 24x24 stroke icons

HOME_DOOR_D = "M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"

HOME_ROOF_D = (
    "M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999"
    "A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"
)

SMILE_D = "M8 14s1.5 2 4 2 4-2 4-2"

SETTINGS_D = (
    "M12.22 2h-.44a2 2 0 0 0-2 2v.18a2 2 0 0 1-1 1.73l-.43.25a2 2 0 0 1-2 0l-.15-.08"
    "a2 2 0 0 0-2.73.73l-.22.38a2 2 0 0 0 .73 2.73l.15.1a2 2 0 0 1 1 1.72v.51"
    "a2 2 0 0 1-1 1.74l-.15.09a2 2 0 0 0-.73 2.73l.22.38a2 2 0 0 0 2.73.73l.15-.08"
    "a2 2 0 0 1 2 0l.43.25a2 2 0 0 1 1 1.73V20a2 2 0 0 0 2 2h.44a2 2 0 0 0 2-2v-.18"
    "a2 2 0 0 1 1-1.73l.43-.25a2 2 0 0 1 2 0l.15.08a2 2 0 0 0 2.73-.73l.22-.39"
    "a2 2 0 0 0-.73-2.73l-.15-.08a2 2 0 0 1-1-1.74v-.5a2 2 0 0 1 1-1.74l.15-.09"
    "a2 2 0 0 0 .73-2.73l-.22-.38a2 2 0 0 0-2.73-.73l-.15.08a2 2 0 0 1-2 0l-.43-.25"
    "a2 2 0 0 1-1-1.73V4a2 2 0 0 0-2-2z"
)

SQUARE_D = "M0,0 L10,0 L10,10 L0,10 Z"

QUARTER_ARC_D = "M10,0 A10,10 0 0 1 0,10"

ICON_PATHS = [HOME_DOOR_D, HOME_ROOF_D, SMILE_D, SETTINGS_D]


@pytest.fixture
def square_d() -> str:
    return SQUARE_D


@pytest.fixture
def quarter_arc_d() -> str:
    return QUARTER_ARC_D


@pytest.fixture(params=ICON_PATHS, ids=["home_door", "home_roof", "smile", "settings"])
def icon_d(request) -> str:
    return request.param
