"""weighted-digraph test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : The Graph contract, run once per representation.

General guidance
- The `graph` fixture in `conftest.py` yields a fresh graph per backend with
  representation-invariant checking switched on.
- Property-based tests live with the layer they exercise and use
  @pytest.mark.property.
- Markers: unit, contract, property
"""
