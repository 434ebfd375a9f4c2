# capkit/examples/__init__.py
"""
Example domains built on capkit.

- devices: segregated printer/scanner capabilities and a composed Photocopier
- genealogy: a research consumer that depends on a relationship browser
  capability instead of a storage representation
"""
