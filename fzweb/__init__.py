"""
fzweb - manage website bookmarks from the command line and open them
through an interactive fuzzy picker.
"""

__version__ = "0.1.0"
