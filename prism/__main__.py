"""
Prism Module Entry Point
=========================

Allows running the Prism CLI via: python -m prism
"""

from prism.cli import main

if __name__ == "__main__":
    main()
