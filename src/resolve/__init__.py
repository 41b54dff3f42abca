"""Target version, matrix, and platform resolution."""
