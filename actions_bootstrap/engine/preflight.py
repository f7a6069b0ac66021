"""Preflight checks run before anything is changed.

Both checks are fatal gates: the orchestrator stops the run when either
raises, before any secret is set or any file is written.
"""

import shutil
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import structlog
from pydantic import SecretStr

from actions_bootstrap.exceptions import AuthenticationError, MissingDependenciesError, PlatformCommandError
from actions_bootstrap.providers.gh_cli import GitHubCLI

log = structlog.get_logger(__name__)

INSTALL_HINTS = {
    "curl": "sudo apt install curl",
    "jq": "sudo apt install jq",
    "gh": "https://github.com/cli/cli/blob/trunk/docs/install_linux.md",
    "git": "sudo apt install git",
}


@dataclass(frozen=True)
class ToolDependency:
    """Presence of one external tool on PATH.

    Attributes:
        name: Executable name
        present: Whether it was found
    """

    name: str
    present: bool

    @property
    def install_hint(self) -> str:
        return INSTALL_HINTS.get(self.name, f"install '{self.name}' and make sure it is on PATH")


class DependencyPreflight:
    """Checks that required external tools are installed.

    Pure check with no side effects. The lookup function defaults to
    ``shutil.which`` and can be swapped in tests.
    """

    def __init__(
        self,
        required: Sequence[str],
        which: Callable[[str], str | None] | None = None,
    ) -> None:
        self.required = list(required)
        self._which = which or shutil.which

    def check(self) -> list[ToolDependency]:
        """Check every required tool, in order."""
        return [ToolDependency(name=name, present=self._which(name) is not None) for name in self.required]

    def missing(self) -> list[ToolDependency]:
        return [dep for dep in self.check() if not dep.present]

    def ensure(self) -> list[ToolDependency]:
        """Return the checked tools, or fail listing every missing one.

        Raises:
            MissingDependenciesError: If any tool is missing.
        """
        checked = self.check()
        missing = [dep for dep in checked if not dep.present]
        if missing:
            log.error("preflight_missing_tools", missing=[dep.name for dep in missing])
            raise MissingDependenciesError(missing)

        log.info("preflight_ok", tools=self.required)
        return checked


class AuthenticationCheck:
    """Verifies the GitHub CLI session and exports its token."""

    def __init__(self, gh: GitHubCLI) -> None:
        self.gh = gh

    def ensure(self) -> SecretStr:
        """Confirm the session and return the exported token.

        Raises:
            AuthenticationError: If there is no session or no token.
        """
        try:
            self.gh.auth_status()
        except PlatformCommandError as e:
            log.error("auth_status_failed", returncode=e.returncode)
            raise AuthenticationError("You are not authenticated with the GitHub CLI") from e

        try:
            token = self.gh.auth_token()
        except PlatformCommandError as e:
            log.error("auth_token_failed", returncode=e.returncode)
            raise AuthenticationError(
                "Could not obtain a token from the GitHub CLI",
                hint="Make sure you are logged in with: gh auth login",
            ) from e

        if not token.get_secret_value():
            raise AuthenticationError(
                "The GitHub CLI returned an empty token",
                hint="Make sure you are logged in with: gh auth login",
            )

        log.info("auth_ok")
        return token
