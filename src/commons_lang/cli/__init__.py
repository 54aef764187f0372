"""CLI layer: argument parsing, rendering, and the error boundary.

This package is the outermost layer.  It may import from ``core``;
``core`` never imports from ``cli``.
"""
