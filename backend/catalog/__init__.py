"""
Kit Catalog — predefined stand kits, package templates and the custom-kit builder.

Produces finished, immutable Kit values. The pricing engine only ever consumes them.
"""
