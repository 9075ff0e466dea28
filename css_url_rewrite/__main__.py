"""
Main entry point for the css_url_rewrite package.

Allows running the rewriter as: python -m css_url_rewrite
"""

import sys

from css_url_rewrite.cli import main

if __name__ == "__main__":
    sys.exit(main())
