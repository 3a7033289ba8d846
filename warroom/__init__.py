"""
Incident War Room Agents
========================

Jira-integrated agents for incident response: workload-based
auto-assignment, SLA risk prediction and scripted ticket automation.
"""

__version__ = "1.0.0"
