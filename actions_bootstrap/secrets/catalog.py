"""The fixed catalog of repository secrets this tool provisions.

Each ``SecretSpec`` carries its own input-collection strategy, so the
provisioner never dispatches on secret names. The catalog order is the order
in which secrets are offered and submitted on every run.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Protocol

from actions_bootstrap.enums import SecretSourceKind
from actions_bootstrap.exceptions import SecretSourceError
from actions_bootstrap.utils.prompts import InputProvider


class SecretSource(Protocol):
    """Collects the value of a secret from the operator."""

    kind: ClassVar[SecretSourceKind]

    def collect(self, prompter: InputProvider, spec: "SecretSpec") -> str: ...


@dataclass(frozen=True)
class FileContentsSource:
    """Value is the full contents of a file whose path the operator types."""

    kind: ClassVar[SecretSourceKind] = SecretSourceKind.FILE_CONTENTS
    prompt_text: str = "Path to the file"

    def collect(self, prompter: InputProvider, spec: "SecretSpec") -> str:
        """Read the file named by the operator.

        Raises:
            SecretSourceError: If the path is empty or not a readable file.
        """
        raw = prompter.prompt(self.prompt_text)
        if not raw:
            raise SecretSourceError("No file path given")

        path = Path(raw).expanduser()
        if not path.is_file():
            raise SecretSourceError(f"File not found: {path}")
        try:
            return path.read_text()
        except (OSError, UnicodeDecodeError) as e:
            raise SecretSourceError(f"Cannot read {path}: {e}") from e


@dataclass(frozen=True)
class LiteralValueSource:
    """Value is typed by the operator without echo."""

    kind: ClassVar[SecretSourceKind] = SecretSourceKind.LITERAL_VALUE

    def collect(self, prompter: InputProvider, spec: "SecretSpec") -> str:
        """Prompt for the value with hidden input.

        Raises:
            SecretSourceError: If the operator enters nothing.
        """
        value = prompter.prompt_secret(f"Value for {spec.name}")
        if not value:
            raise SecretSourceError("Empty value, nothing submitted")
        return value


@dataclass(frozen=True)
class SecretSpec:
    """One entry of the secret catalog.

    Attributes:
        name: Actions secret name
        description: What the secret is used for, shown before the opt-in prompt
        source: How the value is collected
        example: Example ``gh`` invocation for the setup guide
    """

    name: str
    description: str
    source: SecretSource
    example: str

    @property
    def source_kind(self) -> SecretSourceKind:
        return self.source.kind


SECRET_CATALOG: tuple[SecretSpec, ...] = (
    SecretSpec(
        name="SSH_PRIVATE_KEY",
        description="Private SSH key used for deployments",
        source=FileContentsSource(prompt_text="Path to the private SSH key"),
        example="gh secret set SSH_PRIVATE_KEY < ~/.ssh/id_rsa",
    ),
    SecretSpec(
        name="DEPLOY_HOST",
        description="Primary deployment host",
        source=LiteralValueSource(),
        example='gh secret set DEPLOY_HOST --body "my-server.com"',
    ),
    SecretSpec(
        name="SLACK_WEBHOOK_URL",
        description="Slack webhook URL for notifications",
        source=LiteralValueSource(),
        example='gh secret set SLACK_WEBHOOK_URL --body "https://hooks.slack.com/..."',
    ),
    SecretSpec(
        name="PROMETHEUS_PUSHGATEWAY_URL",
        description="Prometheus Pushgateway URL",
        source=LiteralValueSource(),
        example='gh secret set PROMETHEUS_PUSHGATEWAY_URL --body "http://monitoring:9091"',
    ),
)
