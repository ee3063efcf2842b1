"""Absence Tracker package.

Feature modules (students, storage, ...) with a thin Flask controller layer
on top of service/repository layers.
"""
