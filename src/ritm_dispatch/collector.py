"""
Variable Collector — reads a requested item's catalog variables.
"""

import logging
from collections.abc import Iterable
from typing import Protocol

from ritm_dispatch.models.record import ItemOption
from ritm_dispatch.variables import RequestVariables

logger = logging.getLogger(__name__)


class VariableSource(Protocol):
    def item_options(self, request_item_id: str) -> Iterable[ItemOption]:
        """Variable-option associations linked to a requested item."""
        ...


def collect_variables(request_item_id: str, source: VariableSource) -> RequestVariables:
    """Collect variable name -> value for a requested item.

    Associations without a variable name are skipped. If the source fails
    part way, the variables read so far are returned and a warning is logged.
    """
    if not request_item_id or not request_item_id.strip():
        raise ValueError("request_item_id must be a non-empty sys_id")

    values: dict[str, str] = {}
    try:
        for option in source.item_options(request_item_id):
            if not option.variable_name:
                continue
            values[option.variable_name] = option.value or ""
    except Exception as e:
        logger.warning(f"Could not read variables for {request_item_id}: {e}")
    return RequestVariables(values)
