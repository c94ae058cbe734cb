"""Internal modules for Zendesk SDK.

WARNING: This package contains implementation details of the resource
accessors. These are not intended for direct use in application code.

Modules:
    http - HTTP client factory and connection settings
    envelopes - Request/response envelope models
    formatters - Query-string helpers
    logging - Structured logging scope for operations
"""
