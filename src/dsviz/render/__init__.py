"""Layout and matplotlib rendering for dsviz structures."""
