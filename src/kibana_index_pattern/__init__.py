"""Kibana index pattern generation from beat field definitions."""
