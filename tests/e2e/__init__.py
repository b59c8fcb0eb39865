"""
Storefront E2E Test Suite

End-to-end browser tests using Playwright against the Swag Labs demo store.

Structure:
    conftest.py        - Fixtures and configuration
    test_login.py      - Login form tests
    test_products.py   - Listing, sorting, cart and detail tests

Page objects live in the top-level `pages` package and workflows in
`actions`.

Running Tests:
    pip install -e ".[test]"
    playwright install

    # Run the browser suite (deselected by default)
    pytest -m e2e

    # Run with visible browser
    pytest -m e2e --headed

    # Run specific browser
    pytest -m e2e --browser firefox

    # Against another environment or host
    E2E_ENV=ci E2E_BASE_URL=http://localhost:3000 pytest -m e2e
"""
