"""Contract tests.

Purpose
- Define the Graph behaviour once and run it against every representation to
  keep them interchangeable.

Guidelines
- Take a graph from the parametrized `graph` fixture; never build a concrete
  class directly here.
- Assert only the public contract (return values and observable effects), not
  internals.
"""
