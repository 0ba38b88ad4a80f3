"""Samia Suite back-office package.

Organized by feature modules (users, stock, apartments, staff, ...) with a
thin Flask controller layer over service/repository layers. Every record is
kept as a JSON array in a string-keyed store, namespaced per site.
"""
