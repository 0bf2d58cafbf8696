"""Command line interface for deckcraft."""
