"""The message board around the moderation engine.

- ``store``: in-memory posts, comments, votes, reactions and reports
- ``shame``: the Hall of Shame log of polite content
- ``service``: moderation-gated submission
"""
