"""Core utilities shared by the reporter facility."""
