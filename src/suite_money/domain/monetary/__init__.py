"""Monetary domain package.

This package contains the immutable `Money` value type, currency metadata records
and the errors raised by monetary operations.
"""
