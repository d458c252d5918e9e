# AGPL-3.0 License

from signin_gate.cli import run

run()
