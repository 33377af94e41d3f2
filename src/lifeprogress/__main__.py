"""Run with: python -m lifeprogress"""
import sys

from lifeprogress.main import main

if __name__ == "__main__":
    sys.exit(main())
