"""CLI entry point for the class-dump formatter: python -m scripts.classdump."""

import sys

from scripts.classdump.cli import main

sys.exit(main())
