# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Users API:
# - test_models.py: Unit tests for the Pydantic models and Result type
# - test_user_store.py: UserStore operations and invariants
# - test_api_users.py: HTTP endpoints, envelopes and status codes
# - test_app.py: Root/search routes, error handlers and middleware
# - test_config.py: Settings loading and validation
#
# Run tests with: pytest
# =============================================================================
