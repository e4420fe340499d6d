"""
Version information for google-adwords.

This module contains the version information for the google-adwords library.
It is read by the settings module and re-exported by the package.
"""

__version__ = "1.0.0"
