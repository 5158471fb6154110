"""Command line entry points for boundedfs."""
