"""Command-line entry points for geoweather."""
