"""pilothub command-line interface (``pilothub`` console script)."""
