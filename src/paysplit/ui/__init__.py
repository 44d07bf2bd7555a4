"""Command line and report rendering."""
