# Tests for quantum_objects
#
# Test organization mirrors source structure:
#   - test_subspaces.py: subspace / leakage / ENR / iso index sets
#   - test_isomorphisms.py: real encodings of kets and operators
#   - test_embedded_operators.py: embed, unembed, EmbeddedOperator
#   - test_quantum_object_builders.py: string builders, ladder operators, gates
#
# Running tests:
#   pytest tests/
#   pytest tests/test_subspaces.py -v
#   pytest tests/ -k "leakage"
