"""
Shared Kernel Module
====================

This module contains shared infrastructure and domain elements used across
all bounded contexts (SLA, Assignment and Automation).

Architecture Pattern: Modular Monolith
- Each module (sla, assignment, automation) is a bounded context
- Shared kernel contains generic infrastructure and the Ticket entity
- Decision logic stays within each module

DO NOT add SLA or assignment rules to the shared kernel.
"""
