"""
CLI module for the revolver package.

Provides the revolver-calc example REPL.
"""
