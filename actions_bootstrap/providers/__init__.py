"""External platform access.

Key Components:
    - GitHubCLI: Wrapper around the ``gh`` auth and secret commands
"""

from actions_bootstrap.providers.gh_cli import GitHubCLI

__all__ = ["GitHubCLI"]
