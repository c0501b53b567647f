"""Campfire Survival - a small top-down survival game."""
