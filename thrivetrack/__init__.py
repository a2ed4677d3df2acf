"""ThriveTrack mood journal service."""
