"""Shared constants for fhirconstraint."""
