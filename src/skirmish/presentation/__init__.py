"""Presentation layers for Skirmish."""
