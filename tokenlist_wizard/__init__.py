"""Interchain token listing wizard.

Walks an operator through adding an interchain token to the curated
squid token lists and opening a pull request with the change.
"""

__version__ = "0.1.0"
