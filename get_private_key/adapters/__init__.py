"""Filesystem and key provider adapters."""
