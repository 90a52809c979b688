"""Public API for the Give roles plugin.

Data classes and capability generation are re-exported here. Role
registration, meta capability resolution and user checks live in
``give_roles.api.roles``, ``give_roles.api.meta_caps`` and
``give_roles.api.users``, which depend on the role store engine.
"""

from give_roles.api.capabilities import *
from give_roles.api.data import *
