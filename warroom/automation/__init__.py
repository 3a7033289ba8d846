"""
Automation Bounded Context
==========================

Scripted ticket agents: description auto-fix, subtask generation,
sprint slippage forecast, timeline comments and war-room permissions.
"""
