"""Shared package for the Site Walk application.

This package contains code used by both the backend Flask API and the client
application. It includes:

- Database models (models.py) - SQLAlchemy models for projects and equipment
- Enums (enums.py) - Equipment kinds, editor input types, sort and cell modes
- Lookup data (lookup.py) - Standard dropdown option lists
- Validation utilities (validation.py, schemas.py) - Input validation and sanitization
"""
