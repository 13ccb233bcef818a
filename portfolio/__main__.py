"""Allow `python -m portfolio` to start the development server."""

from . import main

main()
