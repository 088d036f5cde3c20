"""Adapters that let different query layers hand out single pages."""
