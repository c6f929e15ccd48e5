"""Module entrypoint for ``python -m sitebuilder``.

All argument parsing and session handling happen in ``sitebuilder.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
