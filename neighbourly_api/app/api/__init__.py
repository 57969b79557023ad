"""HTTP surface of the Neighbourly API."""
