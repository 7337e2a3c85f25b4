"""
sitebundle — entry-point generator for multi-site front-end builds.

Resolves the source entry of every package a site declares and writes
the server and per-site client entry-point files a bundler consumes.
"""

__version__ = "0.1.0"
