"""Public API for altaz: value types, astronomy calculations and observer location."""
