"""
Utility modules: business calendar, weighting policies, ranking helpers,
duration parsing, exceptions and logging.
"""
