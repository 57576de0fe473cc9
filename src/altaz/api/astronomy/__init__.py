"""Sidereal time, equatorial to horizontal transform and angular rates."""
