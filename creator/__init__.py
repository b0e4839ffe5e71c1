# Object Creator Package
"""
Searchable creator window for registered data-object types.

Components:
  - Search: Token parser, match evaluator and interactive filter session
  - Services: Type catalog provider and asset output sink
  - Panels: Headless creator window driven by a presentation layer
"""

__version__ = "0.1.0-dev"
