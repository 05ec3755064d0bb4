"""
Asset Browser CLI

Command-line interface for the Asset Browser catalog.
"""

from .main import cli

__all__ = ["cli"]


def main() -> None:
    """Main CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
