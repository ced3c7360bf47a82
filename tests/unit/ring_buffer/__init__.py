"""Ring buffer test suite.

- L1: FixedSizeBuffer internal unit tests
- L2: Overwrite policy and drop accounting
- L3: Python protocol surface and configuration hooks
"""
