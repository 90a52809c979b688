"""Data classes and enums for representing roles, capabilities, and subjects."""

from enum import Enum
from typing import ClassVar

from attrs import define, field

__all__ = [
    "CapabilityData",
    "EntityType",
    "PolicyIndex",
    "GroupingPolicyIndex",
    "RoleData",
    "UserData",
]

POLICY_ATTRIBUTES_SEPARATOR = "^"


class PolicyIndex(Enum):
    """Index positions for fields in a Casbin policy (p).

    Policies grant or refuse a capability to a role.
    Format: [role, capability, effect]
    """

    ROLE = 0
    CAP = 1
    EFFECT = 2


class GroupingPolicyIndex(Enum):
    """Index positions for fields in a Casbin grouping policy (g).

    Grouping policies represent role membership.
    Format: [user, role]
    """

    SUBJECT = 0
    ROLE = 1


class EntityType(Enum):
    """Entity types whose capabilities are generated from a shared template.

    The value is the capability type token interpolated into the template
    (e.g., ``edit_give_form``, ``delete_give_payments``).
    """

    FORM = "give_form"
    PAYMENT = "give_payment"

    @property
    def capability_type(self) -> str:
        """The token interpolated into generated capability names."""
        return self.value


@define
class NamespacedData:
    """Base class for the data classes stored in the policy store.

    Attributes:
        NAMESPACE: The namespace prefix for the data type (e.g., 'user', 'role', 'cap').
        SEPARATOR: The separator between the namespace and the identifier (default: '^').
        external_key: The ID for the object outside of the policy store (e.g., '42' for a user,
            'give_manager' for a role, 'edit_give_form' for a capability).
        namespaced_key: The ID for the object within the policy store, combining namespace and
            external_key (e.g., 'user^42', 'role^give_manager', 'cap^edit_give_form').

    Examples:
        >>> role = RoleData(external_key='give_manager')
        >>> role.namespaced_key
        'role^give_manager'
        >>> cap = CapabilityData(namespaced_key='cap^view_give_reports')
        >>> cap.external_key
        'view_give_reports'
    """

    NAMESPACE: ClassVar[str] = None
    SEPARATOR: ClassVar[str] = POLICY_ATTRIBUTES_SEPARATOR

    external_key: str = ""
    namespaced_key: str = ""

    def __attrs_post_init__(self):
        """Derive whichever of external_key or namespaced_key was not provided."""
        if not self.external_key and not self.namespaced_key:
            raise ValueError("Either external_key or namespaced_key must be provided.")

        if not self.namespaced_key:
            self.namespaced_key = f"{self.NAMESPACE}{self.SEPARATOR}{self.external_key}"

        if not self.external_key:
            namespace, separator, key = self.namespaced_key.partition(self.SEPARATOR)
            if not separator or namespace != self.NAMESPACE or not key:
                raise ValueError(f"Invalid namespaced_key for {self.NAMESPACE}: {self.namespaced_key}")
            self.external_key = key

    def __str__(self):
        return self.external_key

    def __repr__(self):
        return self.namespaced_key


@define(repr=False)
class UserData(NamespacedData):
    """A user of the host site, identified by primary key.

    Examples:
        >>> UserData(external_key='42').namespaced_key
        'user^42'
    """

    NAMESPACE: ClassVar[str] = "user"

    @classmethod
    def from_user_id(cls, user_id) -> "UserData":
        """Build a UserData from a user primary key (int or str)."""
        return cls(external_key=str(user_id))

    @property
    def user_id(self) -> str:
        return self.external_key


@define(repr=False)
class CapabilityData(NamespacedData):
    """A capability is a fine-grained permission string checked before an action.

    Examples:
        >>> cap = CapabilityData(external_key='edit_give_forms')
        >>> cap.namespaced_key
        'cap^edit_give_forms'
        >>> cap.name
        'Edit Give Forms'
    """

    NAMESPACE: ClassVar[str] = "cap"

    @property
    def name(self) -> str:
        """The human-readable name of the capability (e.g., 'View Give Reports')."""
        return self.external_key.replace("_", " ").title()


@define(eq=False, repr=False)
class RoleData(NamespacedData):
    """A role is a named bundle of capabilities assignable to a user account.

    Attributes:
        NAMESPACE: 'role' for roles.
        external_key: The role identifier (e.g., 'give_manager', 'administrator').
        namespaced_key: The role identifier with namespace (e.g., 'role^give_manager').
        display_name: Label shown to site administrators (e.g., 'Give Manager').
            Defaults to a title-cased external_key.
        capabilities: Mapping of capability name to grant. A False value records
            that the role explicitly does not hold the capability.

    Examples:
        >>> role = RoleData(external_key='give_worker', capabilities={'read': True})
        >>> role.display_name
        'Give Worker'
        >>> role.granted_capabilities
        ['read']
    """

    NAMESPACE: ClassVar[str] = "role"

    display_name: str = ""
    capabilities: dict[str, bool] = field(factory=dict)

    def __attrs_post_init__(self):
        super().__attrs_post_init__()
        if not self.display_name:
            self.display_name = self.external_key.replace("_", " ").title()

    def __eq__(self, other):
        """Compare roles based on their namespaced_key."""
        if not isinstance(other, RoleData):
            return False
        return self.namespaced_key == other.namespaced_key

    def __hash__(self):
        return hash(self.namespaced_key)

    @property
    def granted_capabilities(self) -> list[str]:
        """Capability names this role grants, in declaration order."""
        return [cap for cap, grant in self.capabilities.items() if grant]

    def __str__(self):
        return self.display_name
