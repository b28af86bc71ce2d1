#!/usr/bin/env python3
"""
Main entry point for the Tubely thumbnail service.

This script starts the HTTP API that accepts thumbnail uploads and serves them back.
"""

from tubely.main import main

if __name__ == "__main__":
    main()
