"""Command line interface for the templating tools."""
