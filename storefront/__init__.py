"""
Storefront backend package.
Holds the HTTP API (`storefront.api`) and process-wide helpers (`storefront.common`).
"""
