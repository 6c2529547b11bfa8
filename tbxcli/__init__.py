"""Command-line client for the tbxmanager.com package repository."""

__version__ = '0.0.0.dev0'
