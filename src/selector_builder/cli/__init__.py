"""Command line interface for the selector builder."""
