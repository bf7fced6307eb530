"""Domain Types — closed enumerations accepted by the request validators.

Invariants:
    - Every closed set is a str Enum; the matching *_TYPES / *_ROLES / *_PROVIDERS
      tuple lists its values in declaration order
    - Sets are fixed at import time and never mutated

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - Plain tuples exported alongside the Enums for callers building forms or
      documentation without importing Enum machinery
"""

from enum import Enum


class LayerType(str, Enum):
    """Kind of context layer."""
    PROFILE = "profile"
    PROJECT = "project"
    TASK = "task"
    SNIPPET = "snippet"
    SESSION = "session"
    ADHOC = "adhoc"


class Visibility(str, Enum):
    """Who can see a context layer."""
    PRIVATE = "private"
    SHARED = "shared"
    PUBLIC = "public"


class RelationshipType(str, Enum):
    """How one context layer relates to another."""
    REQUIRES = "requires"
    ENHANCES = "enhances"
    CONFLICTS = "conflicts"
    REPLACES = "replaces"


class TeamRole(str, Enum):
    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"
    VIEWER = "viewer"


class AIProvider(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    HUGGINGFACE = "huggingface"


LAYER_TYPES: tuple[str, ...] = tuple(m.value for m in LayerType)
VISIBILITY_TYPES: tuple[str, ...] = tuple(m.value for m in Visibility)
RELATIONSHIP_TYPES: tuple[str, ...] = tuple(m.value for m in RelationshipType)
TEAM_ROLES: tuple[str, ...] = tuple(m.value for m in TeamRole)
AI_PROVIDERS: tuple[str, ...] = tuple(m.value for m in AIProvider)

ENUMERATIONS: dict[str, tuple[str, ...]] = {
    "layer_types": LAYER_TYPES,
    "visibility_types": VISIBILITY_TYPES,
    "relationship_types": RELATIONSHIP_TYPES,
    "team_roles": TEAM_ROLES,
    "ai_providers": AI_PROVIDERS,
}
