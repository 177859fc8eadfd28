"""Services Layer — imperative shell around the forum core.

Invariants:
    - One service class per component (questions, reply tree, votes, fan-out, moderation)
    - Services commit their own primary write, then hand events to a NotificationPublisher
    - Authorization always goes through core.access_policy, never inline role checks
"""
