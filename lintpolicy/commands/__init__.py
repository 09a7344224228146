"""Command implementations behind the lintpolicy CLI."""
