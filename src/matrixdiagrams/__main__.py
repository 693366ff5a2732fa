"""
Run with: python -m matrixdiagrams
"""
import sys

from matrixdiagrams.main import main

if __name__ == "__main__":
    sys.exit(main())
