"""Typer command line interface."""
