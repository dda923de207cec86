"""Prometheus side: metric definitions and turning a Signal into metric values."""
