"""
HANDOVER - Hands-on Accounting Navigator for Duties Of the Visiting Employee Role

A single-page reference guide for the research-fund income/expense workflow.
A sidebar of named sections drives a main panel that shows one section at a time,
and a free-text search box jumps straight to a matching section.

Architecture:
- Navigation Context: section catalog, active-section state, search resolution
"""

__version__ = "0.1.0"
