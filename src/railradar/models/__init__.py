"""Pydantic models for stations and tool responses."""
