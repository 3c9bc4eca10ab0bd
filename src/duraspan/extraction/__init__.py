"""Temporal expression extraction for duraspan."""
