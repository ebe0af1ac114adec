"""
Command Line Interface Package

Entry point for the `wallet` console script.
"""
