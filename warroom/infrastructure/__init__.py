"""
Infrastructure
==============

Clients for external systems. Currently only Jira Cloud.
"""
