"""Pydantic schemas for codec inputs and outputs."""
