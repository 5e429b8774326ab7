"""
Codepoint extraction for font subsetting from gettext catalogs.
"""

__version__ = "0.9.0"
