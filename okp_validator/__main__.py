"""Module entrypoint for `python -m okp_validator`.

Delegates to the validator CLI implementation.
"""

from .cli import main


if __name__ == "__main__":
    main()
