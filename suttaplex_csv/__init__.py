"""
suttaplex-csv: check which suttas in a collection have a translation by a
given author and export the answer as CSV.
"""

__version__ = "0.1.0"
