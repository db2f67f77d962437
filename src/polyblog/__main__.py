"""Entry point for `python -m polyblog` and `polyblog` CLI."""

from polyblog.cli.app import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
