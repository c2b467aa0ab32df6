from convcommit.cli.main import run

run()
