"""
Reusable pytest plugins for the test suite.
"""
