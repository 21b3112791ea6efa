"""Reporting domain: chart aggregation, dashboard KPIs and upcoming bills."""
