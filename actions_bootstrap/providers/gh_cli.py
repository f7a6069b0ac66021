"""GitHub CLI wrapper.

Thin synchronous wrapper around the three ``gh`` calls the onboarding
workflow needs. Each call runs exactly once; failures surface as
``PlatformCommandError`` and are never retried.

Secret values are passed on stdin, never on the command line, so they do
not show up in process listings or in error messages.
"""

import subprocess

import structlog
from pydantic import SecretStr

from actions_bootstrap.exceptions import PlatformCommandError

log = structlog.get_logger(__name__)


class GitHubCLI:
    """Runs ``gh`` subcommands.

    Attributes:
        executable: Name or path of the gh binary.
        timeout: Seconds before a call is abandoned.
    """

    def __init__(self, executable: str = "gh", timeout: float = 60.0) -> None:
        self.executable = executable
        self.timeout = timeout

    def _run(self, args: list[str], input_text: str | None = None) -> subprocess.CompletedProcess[str]:
        command = [self.executable, *args]
        try:
            result = subprocess.run(  # nosec B603
                command,
                input=input_text,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise PlatformCommandError(command, None, str(e)) from e
        except subprocess.TimeoutExpired as e:
            raise PlatformCommandError(command, None, f"timed out after {self.timeout}s") from e

        if result.returncode != 0:
            log.debug("gh_command_failed", command=command, returncode=result.returncode)
            raise PlatformCommandError(command, result.returncode, result.stderr or result.stdout)
        return result

    def auth_status(self) -> str:
        """Check for an authenticated session.

        Returns:
            The status report printed by gh.

        Raises:
            PlatformCommandError: If no session is active.
        """
        result = self._run(["auth", "status"])
        # gh prints the status report on stderr
        return (result.stderr or result.stdout).strip()

    def auth_token(self) -> SecretStr:
        """Export the access token of the active session.

        Raises:
            PlatformCommandError: If gh cannot produce a token.
        """
        result = self._run(["auth", "token"])
        return SecretStr(result.stdout.strip())

    def set_secret(self, name: str, value: str, repo: str) -> None:
        """Set an Actions secret on ``owner/name``.

        Args:
            name: Secret name, e.g. ``DEPLOY_HOST``.
            value: Secret value, sent on stdin.
            repo: Target repository in ``owner/name`` form.

        Raises:
            PlatformCommandError: If gh reports a failure.
        """
        self._run(["secret", "set", name, "--repo", repo], input_text=value)
