"""
Live test — dispatches a real repository_dispatch event.

Requires environment variables:
  GITHUB_PAT    — token with repo scope on the target repository
  GITHUB_OWNER  — repository owner
  GITHUB_REPO   — repository name

Run: RITM_DISPATCH_INTEGRATION=1 pytest tests/integration/ -v
"""

import os

import pytest

from ritm_dispatch import DispatchClient, DispatchConfig, RecordSnapshot, Success, build_payload, classify
from ritm_dispatch.variables import RequestVariables

SKIP = not os.environ.get("RITM_DISPATCH_INTEGRATION")

pytestmark = pytest.mark.skipif(SKIP, reason="RITM_DISPATCH_INTEGRATION not set")


def test_dispatch_accepted():
    config = DispatchConfig(
        github_pat=os.environ.get("GITHUB_PAT", ""),
        github_owner=os.environ.get("GITHUB_OWNER", "your-org"),
        github_repo=os.environ.get("GITHUB_REPO", "umm-cloud-provisioning"),
    )
    record = RecordSnapshot(sys_id="live", number="RITM_LIVE_TEST", cat_item_name="Start Research Computing")
    archetype = classify(record.cat_item_name)
    payload = build_payload(archetype, RequestVariables({"project_name": "live-test"}), record, "unknown@umich.edu", config)

    with DispatchClient(config) as client:
        assert client.dispatch(payload) == Success()
