"""Meridian Portal display layer."""
