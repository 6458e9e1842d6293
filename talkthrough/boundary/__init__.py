"""Boundary adapters: session storage and the generative text backend."""
