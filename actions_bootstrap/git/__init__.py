"""Repository identity detection and URL parsing.

Example:
    >>> from actions_bootstrap.git import RepositoryUrlParser
    >>> RepositoryUrlParser("https://github.com/acme/widgets.git").identity()
    RepositoryIdentity(source_url='https://github.com/acme/widgets', owner='acme', name='widgets')
"""

from actions_bootstrap.git.discovery import RepoIdentityResolver, read_remote_url
from actions_bootstrap.git.models import RepositoryIdentity
from actions_bootstrap.git.parser import RepositoryUrlParser

__all__ = [
    "RepoIdentityResolver",
    "read_remote_url",
    "RepositoryIdentity",
    "RepositoryUrlParser",
]
