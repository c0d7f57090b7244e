"""Subspecifications: time values, era interpretation, queries and sync progress."""
