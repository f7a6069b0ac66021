"""Repository URL parsing.

Normalizes the two supported remote URL shapes to a single HTTPS form and
splits owner and name out of the path.

Supported URL formats:
    SSH:
        - git@github.com:owner/repo.git
        - git@github.com:owner/repo

    HTTPS:
        - https://github.com/owner/repo.git
        - https://github.com/owner/repo
        - https://ghe.example.com:8443/owner/repo

Anything else (``ssh://`` URLs, plain ``http://``, bare paths, paths with
whitespace) is rejected.

Example:
    >>> from actions_bootstrap.git.parser import RepositoryUrlParser
    >>> parser = RepositoryUrlParser("git@github.com:acme/widgets.git")
    >>> parser.normalized_url
    'https://github.com/acme/widgets'
    >>> parser.identity().full_name
    'acme/widgets'
"""

import re
from typing import Literal

from actions_bootstrap.exceptions import InvalidRepositoryUrlError
from actions_bootstrap.git.models import RepositoryIdentity


class RepositoryUrlParser:
    """Parser for repository URLs in SSH and HTTPS formats.

    Parsing happens in the constructor; an unsupported URL or a path with
    fewer than two segments raises ``InvalidRepositoryUrlError``.

    Attributes:
        url: Original URL with surrounding whitespace removed.
        url_type: ``'ssh'`` or ``'https'``.
        host: Hostname, including the port for HTTPS URLs that have one.
        path: Repository path without leading/trailing slashes or ``.git``.
    """

    # user@host:path, requires user@ so https://host:port/... never matches.
    # Neither pattern lets whitespace into the path.
    SSH_PATTERN = re.compile(r"^(?P<user>[\w.-]+)@(?P<host>[a-zA-Z0-9._-]+):(?P<path>[^/\s][^\s]*?)(?:\.git)?/?$")

    HTTPS_PATTERN = re.compile(r"^https://(?P<host>[a-zA-Z0-9._-]+(?::\d+)?)/(?P<path>\S+?)(?:\.git)?/?$")

    def __init__(self, url: str) -> None:
        self.url = url.strip()
        self.url_type: Literal["ssh", "https"]

        match = self.SSH_PATTERN.match(self.url)
        if match:
            self.url_type = "ssh"
        else:
            match = self.HTTPS_PATTERN.match(self.url)
            if not match:
                raise InvalidRepositoryUrlError(
                    self.url,
                    reason="Must be SSH (git@host:owner/repo) or HTTPS (https://host/owner/repo)",
                )
            self.url_type = "https"

        self.host: str = match.group("host")
        self.path: str = match.group("path").strip("/")

        segments = self.path.split("/")
        if len(segments) < 2 or not segments[0] or not segments[1]:
            raise InvalidRepositoryUrlError(self.url, reason=f"Path must contain owner/repo (got: {self.path!r})")

        self._owner = segments[0]
        self._name = segments[1]

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def name(self) -> str:
        return self._name

    @property
    def normalized_url(self) -> str:
        """HTTPS form of the URL, without ``.git`` suffix."""
        return f"https://{self.host}/{self.path}"

    def identity(self) -> RepositoryIdentity:
        return RepositoryIdentity(source_url=self.normalized_url, owner=self.owner, name=self.name)
