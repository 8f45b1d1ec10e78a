"""Command implementations for the ccachekit CLI."""
