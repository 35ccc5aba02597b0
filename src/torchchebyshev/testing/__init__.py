"""Test helpers for torchchebyshev."""
