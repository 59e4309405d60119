# uastats/__main__.py

from uastats.cli import cli

if __name__ == "__main__":
    cli()
