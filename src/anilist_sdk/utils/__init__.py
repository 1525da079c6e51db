"""Utility helpers for anilist_sdk."""
