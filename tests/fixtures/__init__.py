"""
Captured cache tool output used across ccachekit tests.
"""
