"""Shared fixtures."""

import pytest

from ritm_dispatch.config import DispatchConfig
from ritm_dispatch.models.record import RecordSnapshot
from tests.fakes import FakeWriter


@pytest.fixture
def config() -> DispatchConfig:
    return DispatchConfig(github_pat="ghp_test", github_owner="umm-rc", github_repo="provisioning")


@pytest.fixture
def record() -> RecordSnapshot:
    return RecordSnapshot(
        sys_id="a1b2c3",
        number="RITM0010001",
        state=3,
        cat_item_name="Start Research Computing",
        requested_for_email="requester@umich.edu",
    )


@pytest.fixture
def writer() -> FakeWriter:
    return FakeWriter()
