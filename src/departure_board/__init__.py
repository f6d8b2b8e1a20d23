"""Merged departure boards from HSL (Digitransit) and National Rail (Darwin)."""
