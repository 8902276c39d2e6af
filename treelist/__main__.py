"""Module entrypoint for ``python -m treelist``.

All argument parsing and output happen in ``treelist.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
