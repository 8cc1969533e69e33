"""Hostel administration API."""
