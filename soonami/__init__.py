"""Soonami - latest significant earthquake viewer.

Fetches the most recent significant earthquake from the USGS API and
presents its title, date and tsunami alert status.
"""
