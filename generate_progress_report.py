#!/usr/bin/env python3
"""
Scrape the Last.fm API documentation, compare it to the implemented
methods and write the Markdown progress report.

Run with: python generate_progress_report.py --implemented implemented.txt -o PROGRESS.md
"""
import sys

from lastfm_progress.main import main

if __name__ == "__main__":
    sys.exit(main())
