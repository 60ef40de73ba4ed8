"""
Entry point for running duckscout as a module: python -m duckscout
"""

from duckscout.cli.commands import app

if __name__ == "__main__":
    app()
