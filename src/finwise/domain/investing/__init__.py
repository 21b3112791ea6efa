"""Investing domain: compound growth projections."""
