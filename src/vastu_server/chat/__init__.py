"""
Vastu chat relay.

Answers follow-up questions about a generated report, with the report summary
supplied by the client on every turn.
"""
