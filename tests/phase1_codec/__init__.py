"""Phase 1: TOON codec tests.

Test Modules:
- test_encoder.py: value formatting, field union, header and row layout
- test_decoder.py: header validation, row handling, advisory count
- test_tokenizer.py: escape state machine
- test_json_text.py: strict JSON parsing and JSON.stringify-style output
- test_inference.py: scalar type inference chain
- test_header.py: header grammar
- test_hypothesis_properties.py: property-based round-trip and escaping tests
"""
