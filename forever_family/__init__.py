"""
Backend package for the Forever Family community site.

This package provides a FastAPI application that takes join and referral
intakes, issues demo member-portal tokens and keeps the community steps
list, all persisted as flat JSON files.
"""
