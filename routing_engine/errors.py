"""Exceptions raised by the routing engine."""


class RoutingEngineError(Exception):
    """Base class for routing engine errors."""


class InvalidScenarioError(RoutingEngineError, ValueError):
    """Scenario inputs violate a precondition (e.g. non-positive target SLA)."""


class AuditTransitionError(RoutingEngineError, ValueError):
    """An audit entry was moved out of a terminal state."""


class AuditEntryNotFoundError(RoutingEngineError, KeyError):
    """No audit entry with the requested id exists on the policy."""
