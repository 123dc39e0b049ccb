"""Fare calculator version, stamped on exported results."""

VERSION = "2025.08.04"
