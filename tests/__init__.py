"""
Test suite for the guidequill package.
"""
