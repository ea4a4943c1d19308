"""Extension tally support modules for main.py."""
