"""Ports layer - contracts between the domain and the outside world."""
