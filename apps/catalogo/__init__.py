"""Points of sale and product catalog."""
