"""
content-gate - workflow gating for content production.

Transition validation for content lifecycle states and publish-readiness
checklists.
"""

__version__ = "0.1.0"
