"""Core primitives shared by every pilothub layer: errors, logging, settings, timestamps."""
