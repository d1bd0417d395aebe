"""Performance benchmarks for patternsearch.

Timing and objective evaluation counts for the search drivers on standard
test functions.
"""
