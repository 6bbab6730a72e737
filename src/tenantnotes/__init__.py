"""
TenantNotes Backend - Multi-tenant Note Taking Service

Organizations (tenants) own their users and notes. Free tenants are capped
at a handful of notes; upgrading to Pro lifts the cap.
"""

__version__ = "1.0.0"
