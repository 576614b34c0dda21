"""Module entrypoint for ``python -m gols``."""

from .cli import main


if __name__ == "__main__":
    main()
