"""
Entry point for running the API as a module.

Usage:
    python -m fitcoach
"""
from fitcoach.main import run

if __name__ == "__main__":
    run()
