"""Blackjack rules: scoring, outcome resolution and state transitions."""
