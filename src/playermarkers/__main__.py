"""Run with: python -m playermarkers"""
import sys

from playermarkers.main import main

if __name__ == "__main__":
    sys.exit(main())
