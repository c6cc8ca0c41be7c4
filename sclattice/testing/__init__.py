"""Regression helpers for sclattice layouts."""

from sclattice.testing.fingerprints import FingerprintRegistry, LayoutFingerprint

__all__ = ["FingerprintRegistry", "LayoutFingerprint"]
