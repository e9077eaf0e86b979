"""
Dispatch configuration — one immutable value per invocation.

Values come from ServiceNow system properties (any name -> value mapping).
The event type, API host and user agent are fixed and not read from the
property bag.
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

PROPERTY_PREFIX = "x_umm_cloud."
PAT_PROPERTY = f"{PROPERTY_PREFIX}github_pat"
OWNER_PROPERTY = f"{PROPERTY_PREFIX}github_owner"
REPO_PROPERTY = f"{PROPERTY_PREFIX}github_repo"
PROPERTY_NAMES = (PAT_PROPERTY, OWNER_PROPERTY, REPO_PROPERTY)

DEFAULT_OWNER = "your-org"
DEFAULT_REPO = "umm-cloud-provisioning"
EVENT_TYPE = "provision-research-environment"
GITHUB_API_HOST = "api.github.com"
USER_AGENT = "ServiceNow-UMM-ResearchComputing"

# sc_req_item.state value for "Work in Progress"
WORK_IN_PROGRESS = 3
CATALOG_ITEMS = (
    "Start Research Computing",
    "Request Secure PHI Research (AVE)",
)


class DispatchConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    github_pat: str = ""
    github_owner: str = DEFAULT_OWNER
    github_repo: str = DEFAULT_REPO
    event_type: str = EVENT_TYPE
    api_host: str = GITHUB_API_HOST
    user_agent: str = USER_AGENT
    timeout: float = 30.0

    @classmethod
    def from_properties(cls, props: Mapping[str, str]) -> "DispatchConfig":
        """Build the config from a property bag. Blank values fall back to defaults."""
        def value(name: str, default: str = "") -> str:
            return (props.get(name) or "").strip() or default

        return cls(
            github_pat=value(PAT_PROPERTY),
            github_owner=value(OWNER_PROPERTY, DEFAULT_OWNER),
            github_repo=value(REPO_PROPERTY, DEFAULT_REPO),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.github_pat)

    @property
    def dispatch_url(self) -> str:
        return f"https://{self.api_host}/repos/{self.github_owner}/{self.github_repo}/dispatches"
