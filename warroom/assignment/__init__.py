"""
Assignment Module
=================

Bounded Context for workload-based ticket assignment.

Responsibilities:
- Pick a bounded set of eligible candidates for a ticket
- Measure each candidate's open-ticket load
- Assign the ticket to the least-loaded candidate
"""
