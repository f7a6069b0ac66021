"""Repository identity discovery.

Reads the configured remote of the local working copy with GitPython and
falls back to asking the operator for the URL when no remote is configured.

Key Exports:
    RepoIdentityResolver: Resolves the RepositoryIdentity for a run.
    read_remote_url: Helper returning a remote's URL or None.

Example:
    >>> from actions_bootstrap.git.discovery import RepoIdentityResolver
    >>> from actions_bootstrap.utils.prompts import ClickInputProvider
    >>> resolver = RepoIdentityResolver(".", ClickInputProvider())
    >>> identity = resolver.resolve()
    >>> print(identity.full_name)
    acme/widgets

Dependencies:
    Requires GitPython (gitpython) package for repository access.
"""

from pathlib import Path

import git
import structlog
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from actions_bootstrap.git.models import RepositoryIdentity
from actions_bootstrap.git.parser import RepositoryUrlParser
from actions_bootstrap.utils.prompts import InputProvider

log = structlog.get_logger(__name__)

URL_PROMPT = "Enter the repository URL (e.g. https://github.com/user/repo)"


def read_remote_url(repo_path: str | Path = ".", remote_name: str = "origin") -> str | None:
    """Return the URL of a git remote, or None if there is none.

    A path outside any git working copy is treated the same as a repository
    without the remote.

    Args:
        repo_path: Any path inside the working copy.
        remote_name: Remote to read.
    """
    try:
        repo = git.Repo(Path(repo_path), search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        log.debug("not_a_git_repository", path=str(repo_path))
        return None

    with repo:
        for remote in repo.remotes:
            if remote.name == remote_name:
                return remote.url.strip() or None
    return None


class RepoIdentityResolver:
    """Determines the owner/name of the repository being onboarded.

    Resolution order:
        1. URL of the configured remote (``origin`` by default)
        2. URL typed by the operator, when no remote is configured

    Either way the URL goes through ``RepositoryUrlParser``; a URL that is not
    a supported shape or lacks an owner/name path raises
    ``InvalidRepositoryUrlError`` rather than producing an empty identity.
    """

    def __init__(self, repo_path: str | Path, prompter: InputProvider, remote_name: str = "origin") -> None:
        self.repo_path = Path(repo_path)
        self.prompter = prompter
        self.remote_name = remote_name

    def resolve(self) -> RepositoryIdentity:
        """Resolve the repository identity.

        Raises:
            InvalidRepositoryUrlError: If the URL cannot be parsed.
        """
        url = read_remote_url(self.repo_path, self.remote_name)
        if url is None:
            log.info("remote_not_configured", remote=self.remote_name)
            url = self.prompter.prompt(URL_PROMPT)
            source = "prompt"
        else:
            source = f"remote:{self.remote_name}"

        identity = RepositoryUrlParser(url).identity()
        log.info("repository_resolved", repo=identity.full_name, url=identity.source_url, source=source)
        return identity
