from pydantic import ValidationError
import pytest

from ritm_dispatch.config import (
    EVENT_TYPE,
    OWNER_PROPERTY,
    PAT_PROPERTY,
    REPO_PROPERTY,
    DispatchConfig,
)


def test_defaults_when_properties_missing():
    config = DispatchConfig.from_properties({})
    assert config.github_pat == ""
    assert not config.is_configured
    assert config.github_owner == "your-org"
    assert config.github_repo == "umm-cloud-provisioning"
    assert config.event_type == EVENT_TYPE == "provision-research-environment"


def test_reads_property_bag():
    config = DispatchConfig.from_properties({
        PAT_PROPERTY: " ghp_abc ",
        OWNER_PROPERTY: "umm-rc",
        REPO_PROPERTY: "",
    })
    assert config.is_configured
    assert config.github_pat == "ghp_abc"
    assert config.github_owner == "umm-rc"
    assert config.github_repo == "umm-cloud-provisioning"
    assert config.dispatch_url == "https://api.github.com/repos/umm-rc/umm-cloud-provisioning/dispatches"


def test_event_type_not_read_from_properties():
    config = DispatchConfig.from_properties({"x_umm_cloud.event_type": "something-else"})
    assert config.event_type == EVENT_TYPE


def test_config_is_immutable():
    config = DispatchConfig(github_pat="ghp_abc")
    with pytest.raises(ValidationError):
        config.github_pat = "other"


def test_property_values_are_stripped():
    config = DispatchConfig.from_properties({
        PAT_PROPERTY: "ghp_abc\n",
        OWNER_PROPERTY: " umm-rc ",
        REPO_PROPERTY: "provisioning\t",
    })
    assert config.github_owner == "umm-rc"
    assert config.github_repo == "provisioning"
    assert config.dispatch_url == "https://api.github.com/repos/umm-rc/provisioning/dispatches"


def test_blank_owner_and_repo_use_defaults():
    config = DispatchConfig.from_properties({OWNER_PROPERTY: "   ", REPO_PROPERTY: " "})
    assert config.github_owner == "your-org"
    assert config.github_repo == "umm-cloud-provisioning"
