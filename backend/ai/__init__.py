"""Automated opponents."""
