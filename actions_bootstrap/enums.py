"""Enumerations for secret sources and provisioning results."""

from enum import Enum


class SecretSourceKind(str, Enum):
    """Where a secret's value is collected from."""

    FILE_CONTENTS = "file_contents"
    LITERAL_VALUE = "literal_value"

    def __str__(self) -> str:
        return self.value


class ProvisionStatus(str, Enum):
    """Result of provisioning one secret during a run.

    - skipped: the operator declined the secret, no API call was made
    - applied: the secret was set on the repository
    - failed: the value could not be collected or the API call failed
    """

    SKIPPED = "skipped"
    APPLIED = "applied"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value
