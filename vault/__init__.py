"""
Account Vault.

Session-authenticated admin backend: a credential store for accounts,
admin principals and sessions, and a session authority gating access to it.
"""

__version__ = "0.1.0"
