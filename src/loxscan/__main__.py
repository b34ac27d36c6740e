"""Allows `python -m loxscan`."""
from .cli import main

raise SystemExit(main())
