"""Medication tracker application.

Models, services, serializers and views for accounts, profiles and
per-profile medication stock.
"""
