"""
ccachekit - post-job save hook for ccache/sccache compiler caches in CI.
"""

__version__ = "0.1.0"
