from commerce_validator_cli.cli import run

run()
