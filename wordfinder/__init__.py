"""
wordfinder - concurrent case-insensitive word search over a handful of files
"""

__version__ = "0.1.0"
