"""
Request Classifier — maps a catalog item label to a request archetype.
"""

from enum import Enum

# Either marker makes a request sensitive. Markers only upgrade, never conflict.
SENSITIVE_MARKERS = ("PHI", "AVE")


class RequestArchetype(str, Enum):
    STANDARD_RESEARCH = "standard_research"
    PHI_AVE = "phi_ave"


def classify(catalog_item_name: str) -> RequestArchetype:
    if any(marker in catalog_item_name for marker in SENSITIVE_MARKERS):
        return RequestArchetype.PHI_AVE
    return RequestArchetype.STANDARD_RESEARCH
