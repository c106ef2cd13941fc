"""HTTP service for the upright design calculator."""
