"""CLI module for cronfmt."""
