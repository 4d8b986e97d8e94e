"""
Command-line interface for resultfold.
"""
