"""Command line interface for Git Changelog."""
