"""Routing: the segment grammar and everything that runs at request time.

Segments are classified once, compiled into anchored patterns, and
matched against incoming URLs. The scanner in :mod:`wren.codegen`
classifies directory names with the same grammar.
"""
