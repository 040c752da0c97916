# Route modules, one per storefront resource plus operational health checks.
