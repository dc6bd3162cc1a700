"""HR Portal package.

This package is organized by feature modules (accounts, employees, requests, ...)
with a thin Flask controller layer over service/repository layers that share a
single JSON document kept in local key-value storage.
"""
