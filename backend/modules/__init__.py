"""
Feature modules for the Tach accounts backend.

- users: account lifecycle (registration, verification, password reset, roles)
- tokens: signed, expiring tokens bound to an email address
- notifications: outbound email
- addresses: read access to the address store

A module exposes Protocol interfaces from interfaces.py and its concrete
services from service.py. Other modules depend on the interfaces only;
shared.container does the wiring.
"""
