"""
SLA Prediction Module
=====================

Bounded Context for SLA breach-risk prediction.

Responsibilities:
- Hold the fixed per-priority SLA budget
- Classify a ticket's breach risk from its age and priority
- Expose the classifier over HTTP, both for live Jira tickets and raw inputs
"""
