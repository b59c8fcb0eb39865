"""
Storefront Test Suite

Test categories:
- test_ordering.py - Order verifier
- test_models.py - SortSpec and Verdict
- test_config.py - Config layers, settings and fixtures
- test_pages.py - Page driver and page objects (mocked page)
- test_actions.py - Actions layer
- e2e/ - Live browser tests (pytest -m e2e)
"""
