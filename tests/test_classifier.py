import pytest

from ritm_dispatch.classifier import RequestArchetype, classify


@pytest.mark.parametrize("label", [
    "Request Secure PHI Research (AVE)",
    "PHI workspace",
    "Secure AVE enclave",
    "xxPHIxx",
])
def test_sensitive_labels(label):
    assert classify(label) is RequestArchetype.PHI_AVE


@pytest.mark.parametrize("label", [
    "Start Research Computing",
    "phi lowercase is not a marker",
    "",
])
def test_default_labels(label):
    assert classify(label) is RequestArchetype.STANDARD_RESEARCH


def test_archetype_values():
    assert RequestArchetype.PHI_AVE.value == "phi_ave"
    assert RequestArchetype.STANDARD_RESEARCH == "standard_research"
