from csslogo.cli import cli

cli()
