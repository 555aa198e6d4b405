"""Application package for the portfolio records backend.

This package exposes the records controller, service, repository and model
modules used by the FastAPI application, plus the server-rendered Home
section. Individual modules contain the concrete implementations and
documentation.
"""
