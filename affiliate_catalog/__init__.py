"""Affiliate product catalog service."""
