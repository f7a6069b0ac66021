"""CLI entry point for actions-bootstrap."""

import sys
from pathlib import Path

import click
import structlog

from actions_bootstrap.config.settings import BootstrapSettings
from actions_bootstrap.engine.context import RunSummary
from actions_bootstrap.engine.orchestrator import OnboardingOrchestrator
from actions_bootstrap.enums import ProvisionStatus
from actions_bootstrap.exceptions import BootstrapError
from actions_bootstrap.utils.logging_config import configure_logging
from actions_bootstrap.utils.prompts import ClickInputProvider

log = structlog.get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_INTERRUPTED = 130

_STATUS_LABELS = {
    ProvisionStatus.APPLIED: ("[OK]", "green"),
    ProvisionStatus.SKIPPED: ("[SKIP]", "yellow"),
    ProvisionStatus.FAILED: ("[FAIL]", "red"),
}


def _print_summary(summary: RunSummary, settings: BootstrapSettings) -> None:
    click.echo()
    click.echo(click.style("=== Setup complete ===", bold=True, fg="green"))
    click.echo()

    click.echo(click.style("Secrets:", bold=True))
    for outcome in summary.outcomes:
        label, color = _STATUS_LABELS[outcome.status]
        click.echo(f"  {click.style(label, fg=color)} {outcome.secret_name}")
        if outcome.status == ProvisionStatus.FAILED and outcome.detail:
            click.echo(f"       {outcome.detail}")
    click.echo()

    click.echo(click.style("Generated files:", bold=True))
    for artifact in summary.artifacts:
        click.echo(f"  {artifact.path}")
    click.echo()

    click.echo(
        click.style("IMPORTANT:", bold=True, fg="yellow")
        + " set github_token with ansible-vault before using the vars file in production"
    )
    click.echo()
    click.echo(click.style("Next steps:", bold=True, fg="yellow"))
    click.echo(f"1. Review and encrypt the secrets in {settings.vars_file}")
    click.echo("2. Run: ansible-playbook -i inventory/hosts setup-cicd.yml")
    click.echo(f"3. Verify the runners at: {summary.identity.runners_url}")
    click.echo(f"4. Read the guide at: {settings.docs_file}")


@click.command(name="actions-bootstrap")
@click.option(
    "--repo-path",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=".",
    help="Path to the Git repository (default: current directory)",
)
@click.option("--log-level", default="WARNING", help="Logging level")
def cli(repo_path: Path, log_level: str) -> None:
    """Set up GitHub Actions secrets and Ansible variables for this repository.

    \b
    Steps:
      1. Check that curl, jq and gh are installed
      2. Check that the GitHub CLI is authenticated
      3. Detect the repository from the git remote (or ask for it)
      4. Offer to set each repository secret
      5. Write the Ansible vars file and the setup guide

    \b
    Exit codes:
      0   - Completed (individual secrets may have failed)
      1   - Missing tools, authentication or repository
      130 - Interrupted
    """
    configure_logging(log_level)

    try:
        settings = BootstrapSettings.load()
        click.echo(click.style("=== GitHub Actions setup ===", bold=True, fg="cyan"))
        orchestrator = OnboardingOrchestrator(repo_path, settings, ClickInputProvider())
        summary = orchestrator.run()
    except BootstrapError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        if e.hint:
            click.echo(click.style(e.hint, fg="yellow"), err=True)
        log.debug("bootstrap_error", exc_info=True)
        sys.exit(EXIT_FATAL)
    except (KeyboardInterrupt, click.Abort):
        click.echo("\nInterrupted by user", err=True)
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        click.echo(click.style(f"Unexpected error: {e}", fg="red"), err=True)
        log.error("bootstrap_unexpected", exc_info=True)
        sys.exit(EXIT_FATAL)

    _print_summary(summary, settings)


if __name__ == "__main__":
    cli()
