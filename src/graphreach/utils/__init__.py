"""Utility helpers for graphreach."""
