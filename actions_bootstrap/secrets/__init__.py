"""Secret catalog and interactive provisioning."""

from actions_bootstrap.secrets.catalog import (
    SECRET_CATALOG,
    FileContentsSource,
    LiteralValueSource,
    SecretSpec,
)
from actions_bootstrap.secrets.provisioner import ProvisionOutcome, SecretProvisioner

__all__ = [
    "SECRET_CATALOG",
    "FileContentsSource",
    "LiteralValueSource",
    "SecretSpec",
    "ProvisionOutcome",
    "SecretProvisioner",
]
