"""runtime-contracts test suite.

Folder taxonomy
- unit/     : Checks of a single module in isolation; everything the package does.
- helpers/  : Shared test doubles (no tests here).

Property-based tests live beside the unit tests and use @pytest.mark.property.
"""
