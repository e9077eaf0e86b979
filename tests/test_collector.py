import logging

import pytest

from ritm_dispatch.collector import collect_variables
from ritm_dispatch.models.record import ItemOption
from tests.fakes import FakeVariableSource


def test_collects_name_value_pairs():
    source = FakeVariableSource({"project_name": "GenomeX", "workload_ml": "true"})
    variables = collect_variables("a1b2c3", source)
    assert dict(variables) == {"project_name": "GenomeX", "workload_ml": "true"}
    assert source.calls == ["a1b2c3"]


def test_skips_unnamed_variables_and_blanks_missing_values():
    source = FakeVariableSource()
    source.options = [
        ItemOption(variable_name=None, value="orphan"),
        ItemOption(variable_name="", value="also orphan"),
        ItemOption(variable_name="department", value=None),
        ItemOption(variable_name="project_name", value="GenomeX"),
    ]
    variables = collect_variables("a1b2c3", source)
    assert dict(variables) == {"department": "", "project_name": "GenomeX"}


def test_empty_request_is_valid():
    assert len(collect_variables("a1b2c3", FakeVariableSource())) == 0


@pytest.mark.parametrize("identity", ["", "   "])
def test_rejects_blank_identity(identity):
    with pytest.raises(ValueError):
        collect_variables(identity, FakeVariableSource())


def test_source_failure_is_logged_not_raised(caplog):
    source = FakeVariableSource(error=RuntimeError("table locked"))
    with caplog.at_level(logging.WARNING):
        variables = collect_variables("a1b2c3", source)
    assert len(variables) == 0
    assert "table locked" in caplog.text
