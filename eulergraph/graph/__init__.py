"""Graph primitives and helpers.

This package provides the `Arc` type and the capability protocols consumed by
tour builders (`base`), the strict NetworkX-backed graph types
`StrictMultiDiGraph` and `StrictMultiGraph`, and conversion helpers
(`convert`).
"""
