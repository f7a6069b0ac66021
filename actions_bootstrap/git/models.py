"""Repository identity model.

Example:
    >>> from actions_bootstrap.git.models import RepositoryIdentity
    >>> identity = RepositoryIdentity(
    ...     source_url="https://github.com/acme/widgets",
    ...     owner="acme",
    ...     name="widgets",
    ... )
    >>> identity.full_name
    'acme/widgets'
"""

from pydantic import BaseModel, ConfigDict, field_validator


class RepositoryIdentity(BaseModel):
    """Owner and name of the repository being onboarded.

    Resolved once per run and immutable afterwards. SSH and HTTPS remotes
    pointing at the same repository produce equal identities.

    Attributes:
        source_url: Normalized HTTPS URL (no ``.git`` suffix)
        owner: Repository owner/organization
        name: Repository name
    """

    model_config = ConfigDict(frozen=True)

    source_url: str
    owner: str
    name: str

    @field_validator("owner", "name")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Ensure owner and name are not empty.

        Values are kept as given so they always match ``source_url``.

        Raises:
            ValueError: If value is empty or whitespace
        """
        if not v or not v.strip():
            raise ValueError("Owner and name must not be empty")
        return v

    @property
    def full_name(self) -> str:
        """Return owner/name format."""
        return f"{self.owner}/{self.name}"

    @property
    def runners_url(self) -> str:
        """Settings page listing the repository's self-hosted runners."""
        return f"{self.source_url}/settings/actions/runners"
