from sdstatus.cli.main import cli

cli()
