# CLI package for freqcolor
"""
Command-line interface for freqcolor.

Commands:
    freqcolor show    — Print the first lines with words colored by frequency
    freqcolor counts  — Print the word frequency table
"""
