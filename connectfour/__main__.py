"""Allow ``python -m connectfour``."""

from .cli import main


main()
