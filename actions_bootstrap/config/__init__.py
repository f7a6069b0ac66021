"""Configuration for onboarding runs.

Example:
    >>> from actions_bootstrap.config import BootstrapSettings
    >>> settings = BootstrapSettings.load()
    >>> settings.vars_file
    PosixPath('inventory/group_vars/cicd_servers/github_secrets.yml')
"""

from actions_bootstrap.config.settings import BootstrapSettings

__all__ = ["BootstrapSettings"]
