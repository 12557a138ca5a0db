"""Routing algorithms operating on `WeightedGraph` indices."""
