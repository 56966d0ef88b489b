"""
Command-line entry points for seqdistance.
"""
