"""Storefront Price Radar — per-country storefront price comparison."""

__version__ = "0.1.0"
