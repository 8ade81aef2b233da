"""Event Manager package.

This package is organized by feature modules (organizations, users, events,
registrations, attendance) with a thin Flask controller layer on top of
service/repository layers backed by a pluggable collection store.
"""
