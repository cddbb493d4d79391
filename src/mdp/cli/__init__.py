"""Command line interface for mdp."""
