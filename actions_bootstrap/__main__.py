from actions_bootstrap.main import cli

cli()
