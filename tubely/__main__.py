"""
Entry point for running the Tubely thumbnail service as a module.
"""

from .main import main

if __name__ == "__main__":
    main()
