"""
Car Wash Ops Package

Data-access layer for a car wash admin console backed by Supabase:
- Vehicle jobs (cars) being washed
- Service catalog with per-size pricing
- Crew roster
- Service packages
"""

__version__ = "1.0.0"
