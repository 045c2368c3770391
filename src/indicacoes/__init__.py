"""
Indicações - Referral Leads Backend

Tracks referral leads through their operational and financial lifecycle,
stores payment receipts and authenticates staff users.
"""

__version__ = "1.0.0"
