"""
Requested-item (sc_req_item) models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class RecordSnapshot(BaseModel):
    """One state of a requested item as seen by the business rule."""

    model_config = ConfigDict(frozen=True)

    sys_id: str
    number: str = ""
    state: int = 0
    cat_item_name: str = ""
    # End of the request -> requested_for -> email chain; None if any link is missing.
    requested_for_email: Optional[str] = None


class TriggerEvent(BaseModel):
    """An update to sc_req_item: the record after and before the change."""

    current: RecordSnapshot
    previous: RecordSnapshot


class ItemOption(BaseModel):
    """A row of sc_item_option_mtom, dot-walked to the variable name and value."""

    variable_name: Optional[str] = None
    value: Optional[str] = None
