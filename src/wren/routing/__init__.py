"""Routing — route globs compiled into single-pass segment matchers.

Globs are compiled once per call site and cached until the glob string
changes.
"""
