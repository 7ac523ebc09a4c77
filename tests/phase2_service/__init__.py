"""Phase 2: Conversion service tests.

Test Modules:
- test_conversion_service.py: request validation, dispatch, response bodies
- test_usage_savings.py: usage document and token savings estimate
- test_config.py: environment-driven settings
- test_serialization.py: strict-JSON primitive conversion
"""
