"""refctl - Tooling for building a WordPress code reference site.

Decides which WordPress source files are handed to the documentation
parser and prepares the reference site (pages, menu, theme) via WP-CLI.
"""

__version__ = "0.1.0"
