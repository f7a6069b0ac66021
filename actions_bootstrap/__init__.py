"""actions-bootstrap: onboard a repository onto GitHub Actions.

Sets the repository's Actions secrets through the GitHub CLI and writes the
Ansible variables file and setup guide used by the CI/CD deployment role.
"""

__version__ = "0.1.0"
