"""Adapters to external sites and output surfaces."""
