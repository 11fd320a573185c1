"""
Author List Generator

Reads authorship from Git history, folds name variants into canonical
contributors and renders the Go source consumed by the "about" screen.
"""

__version__ = "1.0.0"
__author__ = "CoyIM Team"
__description__ = "Contributor list generator for the about screen"
