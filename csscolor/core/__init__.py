"""Converter configuration and pipeline."""
